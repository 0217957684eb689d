"""Errors raised while parsing a token stream."""

from __future__ import annotations


class LookUpError(Exception):
    """No parse function is registered for a token kind."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Lookup error: {self.message}"


class ParserError(Exception):
    """Base class for errors found while parsing."""

    prefix = "Parser error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class UnexpectedTokenError(ParserError):
    """A token appeared where it cannot be used, or none was left."""

    prefix = "Unexpected token"


class MissingTokenError(ParserError):
    """A required token is absent."""

    prefix = "Missing token"


class InvalidExpressionError(ParserError):
    """The tokens do not form a valid expression."""

    prefix = "Invalid expression"


class ParserTypeError(ParserError):
    """An expression has a type it cannot have."""

    prefix = "Type error"


class ParserLookupError(ParserError):
    """A lookup failure that stopped the parse."""

    prefix = "Lookup error"

    def __init__(self, error: LookUpError) -> None:
        super().__init__(str(error))
        self.error = error