"""Expression tree nodes, their operators and type descriptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, Union

from .tokens import SourceSpan, TokenKind

_INT_RANGES: dict[str, tuple[int, int]] = {
    "Int16": (-(2**15), 2**15 - 1),
    "Int32": (-(2**31), 2**31 - 1),
    "Int64": (-(2**63), 2**63 - 1),
    "Int128": (-(2**127), 2**127 - 1),
}
_FLOAT_KINDS = frozenset({"Float32", "Float64"})
_VALUE_RANGES: dict[str, tuple[int, int]] = {
    "I32": _INT_RANGES["Int32"],
    "I64": _INT_RANGES["Int64"],
}

LiteralValue = Union[int, float, bool, str]


def _check_int(name: str, value: object, bounds: tuple[int, int]) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} needs an integer, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in {name}")


@dataclass(frozen=True)
class Type:
    """A type together with a value of that type."""

    name: str
    value: int | float | str

    def __post_init__(self) -> None:
        if self.name in _INT_RANGES:
            _check_int(self.name, self.value, _INT_RANGES[self.name])
        elif self.name in _FLOAT_KINDS:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise TypeError(f"{self.name} needs a number, got {self.value!r}")
        elif self.name == "String":
            if not isinstance(self.value, str):
                raise TypeError(f"String needs a str, got {self.value!r}")
        else:
            raise ValueError(f"unknown type {self.name!r}")


@dataclass(frozen=True)
class Value:
    """A runtime integer value of fixed width."""

    name: str
    value: int

    def __post_init__(self) -> None:
        bounds = _VALUE_RANGES.get(self.name)
        if bounds is None:
            raise ValueError(f"unknown value kind {self.name!r}")
        _check_int(self.name, self.value, bounds)


class Expr(Protocol):
    """Anything that can stand in an expression tree."""

    type_info: Type | None

    @property
    def span(self) -> SourceSpan:
        """The region of source the expression was parsed from."""
        ...


@dataclass
class LiteralExpr:
    """A literal value written directly in the source."""

    value: LiteralValue
    span: SourceSpan
    type_info: Type | None = None


class BinaryOp(Enum):
    """Operators that combine two expressions."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()

    EQUAL = auto()
    NOT_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    AND = auto()
    OR = auto()

    @staticmethod
    def from_token(kind: TokenKind) -> BinaryOp:
        """Return the operator a token stands for; ValueError if none."""
        try:
            return _BINARY_OPS[kind]
        except KeyError:
            raise ValueError(f"Unknown binary operator: {kind.name}") from None


_BINARY_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.DASH: BinaryOp.SUB,
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
    TokenKind.MODULO: BinaryOp.MOD,
    TokenKind.LESS: BinaryOp.LESS,
    TokenKind.GREATER: BinaryOp.GREATER,
    TokenKind.AMPER: BinaryOp.AND,
    TokenKind.VERTICAL_BAR: BinaryOp.OR,
}


@dataclass
class BinaryExpr:
    """Two expressions joined by an operator."""

    left: Expr
    op: BinaryOp
    right: Expr
    type_info: Type | None = None

    @property
    def span(self) -> SourceSpan:
        """From the start of the left operand to the end of the right one."""
        return self.left.span.combine(self.right.span)


class UnaryOp(Enum):
    """Operators that apply to a single expression."""

    REF = auto()
    DEREF = auto()
    NEG = auto()
    NOT = auto()


@dataclass
class UnaryExpr:
    """An operator applied to one expression."""

    op: UnaryOp
    expr: Expr
    type_info: Type | None = None


class TypeVisitor(ABC):
    """Computes the type of each kind of expression node."""

    @abstractmethod
    def visit_literal(self, expr: LiteralExpr) -> Type:
        """Return the type of a literal."""

    @abstractmethod
    def visit_binary(self, expr: BinaryExpr) -> Type:
        """Return the type of a binary expression."""