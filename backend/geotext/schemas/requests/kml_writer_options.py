from geotext.core.constants import DEFAULT_MAX_COORDINATES_PER_LINE
from geotext.enums.altitude_mode import AltitudeMode
from pydantic import BaseModel, ConfigDict, Field, field_validator


class KmlWriterOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    precision: int = Field(-1, description="Maximum decimal places per ordinate, negative for floating precision")
    max_coordinates_per_line: int = Field(DEFAULT_MAX_COORDINATES_PER_LINE, description="Coordinates written before wrapping the line")
    line_prefix: str | None = Field(None, description="Prefix of every emitted line")
    extrude: bool = False
    tesselate: bool = False
    altitude_mode: AltitudeMode | None = None
    z: float | None = Field(None, description="Z value written for every coordinate, overriding the geometry's own")

    @field_validator('max_coordinates_per_line')
    @classmethod
    def _clamp_max_coordinates_per_line(cls, value: int) -> int:
        return max(1, value)

    @field_validator('altitude_mode', mode='before')
    @classmethod
    def _strip_altitude_mode(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value
