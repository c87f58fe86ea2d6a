from pydantic import BaseModel, Field


class ReadWkt(BaseModel):
    text: str = Field(..., description="Sequence of WKT geometries separated by whitespace")
    offset: int = Field(0, ge=0, description="Geometries to skip")
    limit: int = Field(-1, ge=-1, description="Max number of geometries, -1 for all")
