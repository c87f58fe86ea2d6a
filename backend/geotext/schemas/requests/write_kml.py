from geotext.schemas.requests.kml_writer_options import KmlWriterOptions
from pydantic import BaseModel, Field


class WriteKml(BaseModel):
    wkt: str = Field(..., description="Geometry in well-known text")
    options: KmlWriterOptions | None = Field(None, description="Writer options, server defaults when omitted")
