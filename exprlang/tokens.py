"""Token kinds, source positions and the tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Every kind of token the lexer can produce."""

    FLOAT = auto()
    INTEGER = auto()
    PLUS = auto()
    STAR = auto()
    EQUAL = auto()
    MODULO = auto()
    SLASH = auto()
    DASH = auto()
    AMPER = auto()

    GREATER = auto()
    LESS = auto()
    NEGATION = auto()
    VERTICAL_BAR = auto()

    SEMICOLON = auto()

    IF = auto()
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    FUNCTION = auto()
    RETURN = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COMMA = auto()
    COLON = auto()
    IDENTIFIER = auto()
    LITERALSTRING = auto()


@dataclass(frozen=True)
class Position:
    """A 1-based line and column in a source text."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceSpan:
    """The region of source text between two positions."""

    start: Position
    end: Position

    def combine(self, other: SourceSpan) -> SourceSpan:
        """Return a span from the start of this span to the end of ``other``."""
        return SourceSpan(self.start, other.end)


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and location."""

    kind: TokenKind
    value: str
    span: SourceSpan