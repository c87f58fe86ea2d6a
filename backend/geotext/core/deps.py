from geotext.core.settings import Settings
from geotext.schemas.requests import KmlWriterOptions


def get_default_writer_options() -> KmlWriterOptions:
    return KmlWriterOptions(
        precision=Settings.KML_DEFAULT_PRECISION,
        max_coordinates_per_line=Settings.KML_MAX_COORDINATES_PER_LINE,
    )
