import math
from decimal import ROUND_HALF_UP, Context, Decimal

import numpy as np
import shapely
from shapely import Geometry
from shapely.geometry import LineString, mapping

# Enough digits to quantize any finite float
_DECIMAL_CONTEXT = Context(prec=400)


def get_xyz(geometry: Geometry) -> np.ndarray:
    """Coordinates as an (N, 3) array, Z is nan where the geometry has none."""
    return shapely.get_coordinates(geometry, include_z=True)

def is_defined(value: float | None) -> bool:
    return value is not None and not math.isnan(value)

def round_half_up(value: float, precision: int) -> float:
    """Round to `precision` decimal places, ties away from zero."""
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))

def format_ordinate(value: float, precision: int) -> str:
    """
    Locale independent positional notation, never scientific.

    A negative precision gives the shortest text that reads back to the same float,
    otherwise the value is rounded half away from zero to at most `precision`
    decimal places with trailing zeros removed.
    """
    if precision < 0:
        return np.format_float_positional(float(value), trim='-')
    return np.format_float_positional(round_half_up(float(value), precision), trim='-')

def to_geojson(geometry: Geometry) -> dict | None:
    """
    GeoJSON mapping of `geometry`, None when it is empty.

    Empty members of collections are dropped and linear rings become line
    strings, at any depth.
    """
    if geometry.is_empty:
        return None
    match geometry.geom_type:
        case 'LinearRing':
            return mapping(LineString(geometry.coords))
        case 'GeometryCollection':
            members = (to_geojson(member) for member in geometry.geoms)
            return {
                'type': 'GeometryCollection',
                'geometries': [member for member in members if member is not None],
            }
        case 'MultiPoint' | 'MultiLineString' | 'MultiPolygon':
            parts = [part for part in geometry.geoms if not part.is_empty]
            return mapping(type(geometry)(parts))
    return mapping(geometry)
