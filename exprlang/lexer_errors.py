"""Errors raised by the lexer, rendered as annotated source excerpts."""

from __future__ import annotations


class LexerError(Exception):
    """Base class for errors found while tokenizing source text."""

    def __init__(self, context: str, filename: str, line: int, col: int) -> None:
        super().__init__(context, filename, line, col)
        self.context = context
        self.filename = filename
        self.line = line
        self.col = col

    def _lines(self) -> list[str]:
        return [f"{self.filename}:{self.line}:{self.col}: lexer error"]

    def __str__(self) -> str:
        return "\n".join(self._lines()) + "\n"


class InvalidCharacterError(LexerError):
    """A character that cannot start any token."""

    def __init__(
        self, context: str, filename: str, character: str, line: int, col: int
    ) -> None:
        super().__init__(context, filename, line, col)
        self.character = character

    def _lines(self) -> list[str]:
        return [
            f"invalid character {self.character}",
            f"{self.filename}:{self.line}:{self.col}",
            "|",
            f"{self.line:>3} | {self.context}",
            f"| {'':>{self.col + 3}}^ invalid character",
        ]


class UnexpectedEOFError(LexerError):
    """The input ended where more text was required."""

    def _lines(self) -> list[str]:
        return [
            "unexpected EOF",
            f"--> {self.filename}:{self.line}:{self.col}",
            "  |",
            f"{self.line:>3} | {self.context}",
            f"  | {'':>{self.col}}^ unexpected EOF",
        ]


class UnterminatedStringError(LexerError):
    """A string literal without its closing quote on the same line."""

    def _lines(self) -> list[str]:
        return [
            "Unterminated String literal",
            f" --> {self.filename}:{self.line}:{self.col}",
            "  |",
            f"{self.line:>3} | {self.context}",
            f"  | {'':>{self.col}}^ unterminated string",
        ]