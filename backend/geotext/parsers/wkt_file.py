import logging
import os
from contextlib import contextmanager
from typing import Iterator, TextIO

from shapely import Geometry

from geotext.core.constants import MAX_LOOKAHEAD
from geotext.core.errors import ResourceAcquisitionFailure
from geotext.parsers.wkt_geometry import WktReader
from geotext.parsers.wkt_tokenizer import TokenCursor

logger = logging.getLogger(__name__)


class WktFileReader:
    """
    Reads a sequence of geometries from WKT text.

    The geometries may be separated by any amount of whitespace and newlines.
    A reader built from a path opens the file when `read()` runs and closes it
    before returning; a reader built from an open stream leaves closing it to
    the caller. Each reader is meant to read its source once.
    """

    def __init__(self, source: str | os.PathLike | TextIO, wkt_reader: WktReader | None = None, *, offset: int = 0, limit: int = -1):
        self.source = source
        self.wkt_reader = wkt_reader if wkt_reader is not None else WktReader()
        self.offset = offset
        self.limit = limit
        self._count = 0

    def read(self) -> list[Geometry]:
        """
        Read the geometries in the window given by `offset` and `limit`.

        Geometries before `offset` are parsed and skipped; at most `limit`
        geometries are returned, all of them when `limit` is negative.
        """
        self._count = 0
        with self._open() as stream:
            geometries = list(self._read_geometries(self.wkt_reader.tokenizer(stream)))
        logger.debug('Read %d geometries out of %d scanned from %s', len(geometries), self._count, self._describe_source())
        return geometries

    def _read_geometries(self, tokens: TokenCursor) -> Iterator[Geometry]:
        collected = 0
        tokens.advance()
        while not tokens.at_end() and not self._is_at_limit(collected):
            geometry = self.wkt_reader.read_geometry_tagged_text(tokens)
            if self._count >= self.offset:
                yield geometry
                collected += 1
            self._count += 1

    def _is_at_limit(self, collected: int) -> bool:
        if self.limit < 0:
            return False
        return collected >= self.limit

    @contextmanager
    def _open(self) -> Iterator[TextIO]:
        if not isinstance(self.source, (str, os.PathLike)):
            yield self.source
            return

        try:
            stream = open(self.source, 'r', encoding='utf-8', buffering=MAX_LOOKAHEAD)
        except OSError as e:
            raise ResourceAcquisitionFailure(f'Cannot open {os.fspath(self.source)}: {e.strerror}') from e
        logger.debug('Opened %s', os.fspath(self.source))
        try:
            yield stream
        finally:
            stream.close()

    def _describe_source(self) -> str:
        if isinstance(self.source, (str, os.PathLike)):
            return os.fspath(self.source)
        return type(self.source).__name__
