"""Lexer, expression nodes and Pratt parser for a small expression language."""

__version__ = "0.1.0"
__all__ = ["__version__"]