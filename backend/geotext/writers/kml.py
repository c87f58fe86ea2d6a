"""
KML geometry fragments.

The output can be substituted wherever the KML abstract Geometry element is
used. Elements are indented two spaces per nesting level, and every line can
carry a prefix so the fragment fits in a containing document.
"""
import logging
from typing import TextIO, assert_never

from shapely import Geometry

from geotext.core.constants import COORDINATE_SEPARATOR, INDENT_SIZE, TUPLE_SEPARATOR
from geotext.enums.geometry_kind import GeometryKind
from geotext.schemas.requests import KmlWriterOptions
from geotext.utils import format_ordinate, get_xyz, is_defined

logger = logging.getLogger(__name__)


class KmlWriter:
    def __init__(self, options: KmlWriterOptions | None = None):
        self.options = options if options is not None else KmlWriterOptions()

    def write(self, geometry: Geometry) -> str:
        out: list[str] = []
        kind = self._write_geometry(geometry, 0, out)
        kml = ''.join(out)
        logger.debug('Wrote %s as %d characters of KML', kind, len(kml))
        return kml

    def write_to(self, geometry: Geometry, stream: TextIO) -> None:
        stream.write(self.write(geometry))

    def _write_geometry(self, geometry: Geometry, level: int, out: list[str]) -> GeometryKind:
        kind = GeometryKind.of(geometry)
        match kind:
            case GeometryKind.POINT:
                self._write_simple('Point', geometry, level, out)
            case GeometryKind.LINE_STRING:
                self._write_simple('LineString', geometry, level, out)
            case GeometryKind.LINEAR_RING:
                self._write_simple('LinearRing', geometry, level, out)
            case GeometryKind.POLYGON:
                self._write_polygon(geometry, level, out)
            case GeometryKind.GEOMETRY_COLLECTION:
                self._write_collection(geometry, level, out)
            case _:
                assert_never(kind)
        return kind

    def _write_simple(self, tag: str, geometry: Geometry, level: int, out: list[str], write_modifiers: bool = True):
        self._start_line(f'<{tag}>\n', level, out)
        if write_modifiers:
            self._write_modifiers(level + 1, out)
        self._write_coordinates(get_xyz(geometry), level + 1, out)
        self._start_line(f'</{tag}>\n', level, out)

    def _write_polygon(self, polygon: Geometry, level: int, out: list[str]):
        self._start_line('<Polygon>\n', level, out)
        self._write_modifiers(level + 1, out)

        # Rings inherit the polygon's modifiers
        self._start_line('<outerBoundaryIs>\n', level + 1, out)
        self._write_simple('LinearRing', polygon.exterior, level + 2, out, write_modifiers=False)
        self._start_line('</outerBoundaryIs>\n', level + 1, out)

        for hole in polygon.interiors:
            self._start_line('<innerBoundaryIs>\n', level + 1, out)
            self._write_simple('LinearRing', hole, level + 2, out, write_modifiers=False)
            self._start_line('</innerBoundaryIs>\n', level + 1, out)

        self._start_line('</Polygon>\n', level, out)

    def _write_collection(self, collection: Geometry, level: int, out: list[str]):
        self._start_line('<MultiGeometry>\n', level, out)
        for child in collection.geoms:
            self._write_geometry(child, level + 1, out)
        self._start_line('</MultiGeometry>\n', level, out)

    def _write_modifiers(self, level: int, out: list[str]):
        if self.options.extrude:
            self._start_line('<extrude>1</extrude>\n', level, out)
        if self.options.tesselate:
            self._start_line('<tesselate>1</tesselate>\n', level, out)
        if self.options.altitude_mode is not None:
            self._start_line(f'<altitudeMode>{self.options.altitude_mode.value}</altitudeMode>\n', level, out)

    def _write_coordinates(self, coordinates, level: int, out: list[str]):
        """Terminates the coordinate block with a newline, wrapping every `max_coordinates_per_line` tuples."""
        per_line = self.options.max_coordinates_per_line
        self._start_line('<coordinates>', level, out)
        for i, coordinate in enumerate(coordinates):
            if i > 0:
                if i % per_line == 0:
                    out.append('\n')
                    self._start_line(' ' * INDENT_SIZE, level, out)
                else:
                    out.append(TUPLE_SEPARATOR)
            out.append(self._format_coordinate(coordinate))
        out.append('</coordinates>\n')

    def _format_coordinate(self, coordinate) -> str:
        x, y, z = coordinate
        precision = self.options.precision
        ordinates = [format_ordinate(x, precision), format_ordinate(y, precision)]

        # The configured Z wins over the coordinate's own
        if is_defined(self.options.z):
            z = self.options.z
        if is_defined(z):
            ordinates.append(format_ordinate(z, precision))
        return COORDINATE_SEPARATOR.join(ordinates)

    def _start_line(self, text: str, level: int, out: list[str]):
        if self.options.line_prefix is not None:
            out.append(self.options.line_prefix)
        out.append(' ' * (INDENT_SIZE * level))
        out.append(text)


def write_kml(geometry: Geometry, **options) -> str:
    """Write `geometry` as KML with a one-off writer, e.g. `write_kml(geom, z=10.0, extrude=True)`."""
    return KmlWriter(KmlWriterOptions(**options)).write(geometry)
