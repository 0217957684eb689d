"""Pratt parser that builds expression trees from tokens."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum

from .nodes import BinaryExpr, BinaryOp, Expr, LiteralExpr
from .parser_errors import (
    InvalidExpressionError,
    LookUpError,
    ParserLookupError,
    UnexpectedTokenError,
)
from .tokens import Token, TokenKind

_I128_MAX = 2**127 - 1


class BindingPower(IntEnum):
    """How strongly an operator holds on to its operands."""

    PRIMARY = 0
    MUL = 1
    DIV = 2
    ADD = 3
    SUB = 4
    OR = 5
    AND = 6

    @staticmethod
    def from_token(kind: TokenKind) -> BindingPower:
        """Return the binding power of a token; PRIMARY for non-operators."""
        if kind in (TokenKind.PLUS, TokenKind.DASH):
            return BindingPower.ADD
        if kind in (TokenKind.STAR, TokenKind.SLASH, TokenKind.MODULO):
            return BindingPower.MUL
        if kind is TokenKind.VERTICAL_BAR:
            return BindingPower.OR
        if kind is TokenKind.AMPER:
            return BindingPower.AND
        return BindingPower.PRIMARY


class Parser:
    """A cursor over a sequence of tokens with expression parsing."""

    def __init__(self, tokens: Sequence[Token], pos: int = 0) -> None:
        self.tokens = tokens
        self.pos = pos

    def current_token(self) -> Token | None:
        """The token at the cursor, or None at the end."""
        return self.peek(0)

    def peek(self, offset: int) -> Token | None:
        """The token ``offset`` places past the cursor, or None."""
        index = self.pos + offset
        return self.tokens[index] if 0 <= index < len(self.tokens) else None

    def advance(self) -> None:
        """Move the cursor one token forward, stopping at the end."""
        if self.pos < len(self.tokens):
            self.pos += 1

    def parse_primary_expr(self) -> Expr:
        """Parse the most basic unit of an expression."""
        token = self.current_token()
        if token is None:
            raise UnexpectedTokenError("Expected a primary expression")
        if token.kind is not TokenKind.INTEGER:
            raise UnexpectedTokenError(
                f"Unsupported primary expression token: {token.kind.name}"
            )
        self.advance()
        value = int(token.value)
        if value > _I128_MAX:
            raise InvalidExpressionError(
                f"Failed to parse integer literal: {token.value}"
            )
        return LiteralExpr(value, token.span)

    def parse_expr(self, bp: BindingPower = BindingPower.PRIMARY) -> Expr:
        """Parse an expression, folding in operators stronger than ``bp``."""
        left = self.parse_primary_expr()
        while (current := self.current_token()) is not None:
            power = BindingPower.from_token(current.kind)
            if bp >= power:
                break
            try:
                led = get_led_fn(current.kind)
            except LookUpError as error:
                raise ParserLookupError(error) from error
            left = led(self, power, left)
        return left

    def parse_binary_expr(self, bp: BindingPower, left: Expr) -> Expr:
        """Parse an operator at the cursor and its right operand."""
        op = self.current_token()
        if op is None:
            raise UnexpectedTokenError("Expected a binary operator")
        self.advance()
        right = self.parse_expr(BindingPower.from_token(op.kind))
        return BinaryExpr(left, BinaryOp.from_token(op.kind), right)


NudFn = Callable[[Parser], Expr]
LedFn = Callable[[Parser, BindingPower, Expr], Expr]

_LED_KINDS = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.DASH,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.MODULO,
        TokenKind.VERTICAL_BAR,
        TokenKind.AMPER,
    }
)


def get_nud_fn(kind: TokenKind) -> NudFn:
    """Return the function that parses a token in prefix position."""
    if kind is TokenKind.INTEGER:
        return Parser.parse_primary_expr
    raise LookUpError(f"Nud function for token kind {kind.name} not found")


def get_led_fn(kind: TokenKind) -> LedFn:
    """Return the function that parses a token in infix position."""
    if kind in _LED_KINDS:
        return Parser.parse_binary_expr
    raise LookUpError(f"Led function for token kind {kind.name} not found")