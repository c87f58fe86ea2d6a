from pydantic import BaseModel


class KmlDocument(BaseModel):
    geometry_type: str
    kml: str
