import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from geotext.enums.token_type import TokenType


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    line: int
    column: int

    def describe(self) -> str:
        if self.type is TokenType.EOF:
            return 'end of input'
        return f"'{self.text}'"


_TOKEN_PATTERN = re.compile(r"""
      (?P<NUMBER>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    | (?P<WORD>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<L_PAREN>\()
    | (?P<R_PAREN>\))
    | (?P<COMMA>,)
    | (?P<SPACE>\s+)
    | (?P<SYMBOL>.)
""", re.VERBOSE)


def tokenize(lines: Iterable[str]) -> Iterator[Token]:
    """
    Split WKT text into tokens, one line at a time.

    `lines` is typically an open text stream, so the source is only read as far
    as the consumer pulls tokens. Exactly one EOF token ends the sequence.
    """
    line_number = 0
    column = 1
    for line_number, line in enumerate(lines, start=1):
        for match in _TOKEN_PATTERN.finditer(line):
            kind = match.lastgroup
            if kind == 'SPACE':
                continue
            yield Token(TokenType[kind], match.group(), line_number, match.start() + 1)
        column = len(line) + 1
    yield Token(TokenType.EOF, '', max(line_number, 1), column)


class TokenCursor:
    """Forward-only view over a token iterator. `current` is None until the first `advance()`."""

    def __init__(self, tokens: Iterator[Token]):
        self._tokens = tokens
        self.current: Token | None = None

    def advance(self) -> Token:
        if self.current is None or self.current.type is not TokenType.EOF:
            self.current = next(self._tokens)
        return self.current

    def at_end(self) -> bool:
        return self.current is not None and self.current.type is TokenType.EOF
