import io
from typing import Iterable

from shapely import Geometry, wkt
from shapely.errors import ShapelyError

from geotext.core.errors import MalformedGeometryText
from geotext.enums.token_type import TokenType
from geotext.parsers.wkt_tokenizer import Token, TokenCursor, tokenize

GEOMETRY_TAGS = frozenset({
    'POINT',
    'LINESTRING',
    'LINEARRING',
    'POLYGON',
    'MULTIPOINT',
    'MULTILINESTRING',
    'MULTIPOLYGON',
    'GEOMETRYCOLLECTION',
})
DIMENSION_TAGS = frozenset({'Z', 'M', 'ZM'})
EMPTY = 'EMPTY'
EMPTY_TAGS = frozenset({EMPTY})

# Tokens allowed between the outer parentheses of a geometry body
_BODY_TOKENS = frozenset({TokenType.WORD, TokenType.NUMBER, TokenType.L_PAREN, TokenType.R_PAREN, TokenType.COMMA})


def _is_word(token: Token, words: frozenset[str]) -> bool:
    return token.type is TokenType.WORD and token.text.upper() in words

def _unexpected(token: Token, expected: str) -> MalformedGeometryText:
    return MalformedGeometryText(f'Expected {expected} but found {token.describe()}', token.line, token.column)


class WktReader:
    """
    Reads one geometry at a time from a WKT token cursor.

    The tokens of a single geometry are collected up to its closing parenthesis
    and handed to shapely, so a cursor over a large source never holds more
    than one geometry's text.
    """

    def tokenizer(self, lines: Iterable[str]) -> TokenCursor:
        return TokenCursor(tokenize(lines))

    def read(self, text: str) -> Geometry:
        cursor = self.tokenizer(io.StringIO(text))
        cursor.advance()
        geometry = self.read_geometry_tagged_text(cursor)
        if not cursor.at_end():
            raise _unexpected(cursor.current, 'end of input')
        return geometry

    def read_geometry_tagged_text(self, cursor: TokenCursor) -> Geometry:
        """Consume one geometry starting at `cursor.current` and leave the cursor on the token after it."""
        tag = cursor.current
        if not _is_word(tag, GEOMETRY_TAGS):
            raise _unexpected(tag, 'a geometry tag')
        parts = [tag.text.upper()]

        token = cursor.advance()
        if _is_word(token, DIMENSION_TAGS):
            parts.append(token.text.upper())
            token = cursor.advance()

        if _is_word(token, EMPTY_TAGS):
            parts.append(EMPTY)
            cursor.advance()
        elif token.type is TokenType.L_PAREN:
            parts.extend(self._read_body(cursor))
        else:
            raise _unexpected(token, f"'(' or {EMPTY}")

        text = ' '.join(parts)
        try:
            return wkt.loads(text)
        except ShapelyError as e:
            raise MalformedGeometryText(f'Invalid {parts[0]}: {e}', tag.line, tag.column) from e

    def _read_body(self, cursor: TokenCursor) -> list[str]:
        parts = []
        depth = 0
        token = cursor.current
        while True:
            if token.type not in _BODY_TOKENS:
                raise _unexpected(token, "')'" if token.type is TokenType.EOF else 'a coordinate')
            parts.append(token.text)
            if token.type is TokenType.L_PAREN:
                depth += 1
            elif token.type is TokenType.R_PAREN:
                depth -= 1
                if depth == 0:
                    cursor.advance()
                    return parts
            token = cursor.advance()
