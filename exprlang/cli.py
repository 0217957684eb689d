"""Command that tokenizes and parses one source file and prints the tree."""

from __future__ import annotations

import sys
from pprint import pformat

from .lexer import tokenize
from .lexer_errors import LexerError
from .parser import BindingPower, Parser
from .parser_errors import ParserError


def main(argv: list[str] | None = None) -> None:
    """Parse the file named by the first argument and print its expression."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return
    path = args[0]

    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as error:
        print(f"the path doesnt exists: {error}", file=sys.stderr)
        return

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as error:
        print(f"Error reading file: {error}", file=sys.stderr)
        text = ""

    try:
        tokens = tokenize(text, path)
    except LexerError as error:
        print(f"Lexer error: {error}", file=sys.stderr)
        return

    try:
        expr = Parser(tokens).parse_expr(BindingPower.PRIMARY)
    except ParserError as error:
        print(f"Parser error: {error}", file=sys.stderr)
        return
    print(pformat(expr))


if __name__ == "__main__":
    main()