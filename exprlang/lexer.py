"""Turns source text into a list of tokens."""

from __future__ import annotations

import re

from .lexer_errors import (
    InvalidCharacterError,
    UnexpectedEOFError,
    UnterminatedStringError,
)
from .tokens import Position, SourceSpan, Token, TokenKind

_SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.DASH,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.EQUAL,
    "%": TokenKind.MODULO,
    "&": TokenKind.AMPER,
    "|": TokenKind.VERTICAL_BAR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "!": TokenKind.NEGATION,
    "<": TokenKind.LESS,
    ">": TokenKind.GREATER,
}

_KEYWORDS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "for": TokenKind.FOR,
    "func": TokenKind.FUNCTION,
    "return": TokenKind.RETURN,
}

_DIGITS_AND_DOTS = re.compile(r"[0-9.]*")
_DIGITS = re.compile(r"[0-9]+")
_WORD = re.compile(r"\w+")
_STRING_BODY = re.compile(r'[^"\n]*')
_WHITESPACE = re.compile(r"[ \n]+")


class Lexer:
    """A single pass over one source text."""

    def __init__(self, text: str, filename: str) -> None:
        self.text = text
        self.filename = filename
        self._line_start = 0
        self._pos = 0
        self._line = 1
        self._col = 1

    def _peek(self) -> str | None:
        return self.text[self._pos] if self._pos < len(self.text) else None

    def _consume(self, count: int) -> None:
        self._pos += count
        self._col += count

    def _span_from(self, start_col: int) -> SourceSpan:
        return SourceSpan(
            Position(self._line, start_col), Position(self._line, self._col)
        )

    def _emit(self, kind: TokenKind, start: int, start_col: int) -> Token:
        return Token(kind, self.text[start : self._pos], self._span_from(start_col))

    def _invalid(self, character: str) -> InvalidCharacterError:
        return InvalidCharacterError(
            context=self.text[self._line_start : self._pos + 1],
            filename=self.filename,
            character=character,
            line=self._line,
            col=self._col,
        )

    def _float(self) -> Token | None:
        run = _DIGITS_AND_DOTS.match(self.text, self._pos).group()
        if run.count(".") != 1 or run == ".":
            return None
        start, start_col = self._pos, self._col
        self._consume(len(run))
        return self._emit(TokenKind.FLOAT, start, start_col)

    def _integer(self) -> Token | None:
        match = _DIGITS.match(self.text, self._pos)
        if match is None:
            return None
        start, start_col = self._pos, self._col
        self._consume(len(match.group()))
        return self._emit(TokenKind.INTEGER, start, start_col)

    def _number(self) -> Token | None:
        return self._float() or self._integer()

    def _identifier(self) -> Token:
        word = _WORD.match(self.text, self._pos).group()
        start, start_col = self._pos, self._col
        self._consume(len(word))
        return self._emit(_KEYWORDS.get(word, TokenKind.IDENTIFIER), start, start_col)

    def _string(self) -> Token:
        start, start_col = self._pos, self._col
        self._consume(1)
        body = _STRING_BODY.match(self.text, self._pos).group()
        self._consume(len(body))
        if self._peek() != '"':
            raise UnterminatedStringError(
                context=self.text[self._line_start : self._pos],
                filename=self.filename,
                line=self._line,
                col=start_col,
            )
        self._consume(1)
        return self._emit(TokenKind.LITERALSTRING, start, start_col)

    def _multiline_string(self) -> Token:
        raise UnexpectedEOFError(
            context="", filename=self.filename, line=self._line, col=self._col
        )

    def _symbol(self, character: str) -> Token:
        start, start_col = self._pos, self._col
        self._consume(1)
        return self._emit(_SYMBOLS[character], start, start_col)

    def _skip_whitespace(self) -> None:
        for character in _WHITESPACE.match(self.text, self._pos).group():
            self._consume(1)
            if character == "\n":
                self._line += 1
                self._col = 1
                self._line_start = self._pos

    def tokenize(self) -> list[Token]:
        """Tokenize the remaining text, raising a LexerError on bad input."""
        tokens: list[Token] = []
        while (character := self._peek()) is not None:
            if character.isnumeric() or character == ".":
                token = self._number()
                if token is None:
                    raise self._invalid(character)
            elif character.isalpha():
                token = self._identifier()
            elif character == '"':
                if self.text.startswith('"""', self._pos):
                    token = self._multiline_string()
                else:
                    token = self._string()
            elif character in _SYMBOLS:
                token = self._symbol(character)
            elif character in " \n":
                self._skip_whitespace()
                continue
            else:
                raise self._invalid(character)
            tokens.append(token)
        return tokens


def tokenize(text: str, filename: str) -> list[Token]:
    """Tokenize ``text``, naming ``filename`` in any error raised."""
    return Lexer(text, filename).tokenize()