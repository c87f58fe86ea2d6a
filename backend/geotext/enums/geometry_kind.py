from enum import StrEnum

from geotext.core.errors import UnsupportedGeometryKind


class GeometryKind(StrEnum):
    POINT = 'Point'
    LINE_STRING = 'LineString'
    LINEAR_RING = 'LinearRing'
    POLYGON = 'Polygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'

    @classmethod
    def of(cls, geometry) -> 'GeometryKind':
        geom_type = getattr(geometry, 'geom_type', None)
        kind = _KIND_BY_GEOM_TYPE.get(geom_type)
        if kind is None:
            raise UnsupportedGeometryKind(geom_type if geom_type is not None else type(geometry).__name__)
        return kind


# Multi* geometries are written as collections of their parts
_KIND_BY_GEOM_TYPE = {
    'Point': GeometryKind.POINT,
    'LineString': GeometryKind.LINE_STRING,
    'LinearRing': GeometryKind.LINEAR_RING,
    'Polygon': GeometryKind.POLYGON,
    'MultiPoint': GeometryKind.GEOMETRY_COLLECTION,
    'MultiLineString': GeometryKind.GEOMETRY_COLLECTION,
    'MultiPolygon': GeometryKind.GEOMETRY_COLLECTION,
    'GeometryCollection': GeometryKind.GEOMETRY_COLLECTION,
}
