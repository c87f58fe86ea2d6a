import enum


class TokenType(enum.Enum):
    WORD = enum.auto()
    NUMBER = enum.auto()
    L_PAREN = enum.auto()
    R_PAREN = enum.auto()
    COMMA = enum.auto()
    SYMBOL = enum.auto()
    EOF = enum.auto()
