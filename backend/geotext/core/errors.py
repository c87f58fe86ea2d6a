class GeoTextError(Exception):
    """Base error of the geometry/text codec."""


class UnsupportedGeometryKind(GeoTextError):
    """The geometry is none of Point, LineString, LinearRing, Polygon or a collection."""

    def __init__(self, geom_type):
        super().__init__(f'Geometry type not supported: {geom_type}')
        self.geom_type = geom_type


class MalformedGeometryText(GeoTextError):
    """The text source does not hold a well-formed WKT geometry."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f'{message} (line {line}, column {column})'
        super().__init__(message)
        self.line = line
        self.column = column


class ResourceAcquisitionFailure(GeoTextError):
    """The text source could not be opened."""
