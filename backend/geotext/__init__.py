"""
Geometry/text codec: KML geometry fragments out of shapely geometries, and
windowed streaming of WKT geometry sequences.
"""

from geotext.core.errors import GeoTextError, MalformedGeometryText, ResourceAcquisitionFailure, UnsupportedGeometryKind
from geotext.enums.altitude_mode import AltitudeMode
from geotext.enums.geometry_kind import GeometryKind
from geotext.parsers.wkt_file import WktFileReader
from geotext.parsers.wkt_geometry import WktReader
from geotext.schemas.requests import KmlWriterOptions
from geotext.writers.kml import KmlWriter, write_kml

__all__ = [
    "AltitudeMode",
    "GeoTextError",
    "GeometryKind",
    "KmlWriter",
    "KmlWriterOptions",
    "MalformedGeometryText",
    "ResourceAcquisitionFailure",
    "UnsupportedGeometryKind",
    "WktFileReader",
    "WktReader",
    "write_kml",
]
