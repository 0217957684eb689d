# exprlang

A small front end for an expression language: a lexer that turns source text
into tokens with line and column spans, and a Pratt-style parser that builds an
expression tree of integer literals joined by binary operators.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
exprlang path/to/file.expr
```

The file is read as UTF-8, tokenized, and parsed as a single expression; the
resulting tree is pretty-printed to standard output. Errors go to standard
error:

- a file that cannot be opened: `the path doesnt exists: ...`
- lexer failures: `Lexer error: ` followed by the full diagnostic report
- parser failures: `Parser error: ` followed by the error message

Without a path argument the command does nothing.

## Library use

```python
from exprlang.lexer import tokenize
from exprlang.parser import BindingPower, Parser

tokens = tokenize("1 + 2 + 3", "example.expr")
for token in tokens:
    print(token.kind, token.value, token.span)

tree = Parser(tokens).parse_expr(BindingPower.PRIMARY)
print(tree)
```

### Tokens (`exprlang.tokens`)

`Token` is a frozen dataclass with a `kind` (a `TokenKind`), the `value` text it
was read from, and a `span`. A `SourceSpan` holds two `Position`s (`line` and
`column`, both starting at 1); `SourceSpan.combine(other)` returns the span from
its own start to the end of `other`.

### Lexer (`exprlang.lexer`)

`tokenize(text, filename)`, or `Lexer(text, filename).tokenize()`, returns a
list of tokens. The lexer recognises:

- floats: a run of digits containing exactly one dot (`3.14`, `.5`, `7.`)
- integers: a run of ASCII digits (`42`)
- words starting with a letter, continuing with letters, digits or `_`; the
  words `if`, `else`, `while`, `for`, `func` and `return` are keywords, any
  other word is an `IDENTIFIER`
- double-quoted string literals on a single line (the token value keeps the
  quotes)
- the symbols `+ - * / = % & | ( ) { } [ ] , ; : ! < >`

Spaces and newlines separate tokens; no other whitespace is accepted.

Failures raise a subclass of `LexerError` from `exprlang.lexer_errors`, each
carrying `context`, `filename`, `line` and `col`:

- `InvalidCharacterError` (also has `character`) for a character that starts no
  token, such as a tab or a lone `.`
- `UnterminatedStringError` for a string with no closing quote on its line
- `UnexpectedEOFError` for a triple-quoted string, which is not supported

`str(error)` gives a multi-line report with the file name, line, column, the
source line and a caret under the offending position.

### Expression nodes (`exprlang.nodes`)

- `LiteralExpr(value, span, type_info=None)`
- `BinaryExpr(left, op, right, type_info=None)`; its `span` runs from the start
  of `left` to the end of `right`
- `UnaryExpr(op, expr, type_info=None)` with a `UnaryOp` (`REF`, `DEREF`, `NEG`,
  `NOT`)
- `BinaryOp` with `BinaryOp.from_token(kind)`, which raises `ValueError` for a
  token kind that is not an operator
- `Type(name, value)` for `Int16`, `Int32`, `Int64`, `Int128`, `Float32`,
  `Float64` and `String`, and `Value(name, value)` for `I32` and `I64`; both
  check that the value suits the name and raise `TypeError` or `ValueError`
  otherwise
- `TypeVisitor`, an abstract base with `visit_literal` and `visit_binary`
- `Expr`, the protocol every node follows (`span` and `type_info`)

### Parser (`exprlang.parser`)

`Parser(tokens, pos=0)` is a cursor over a token list with `current_token()`,
`peek(offset)` and `advance()`. `parse_expr(bp=BindingPower.PRIMARY)` parses
integer literals joined by `+ - * / % & |`.

Operators are folded in while their `BindingPower` is greater than the one the
parse started with. The values are `PRIMARY` 0, `MUL` 1 (for `* / %`), `ADD` 3
(for `+ -`), `OR` 5 (for `|`) and `AND` 6 (for `&`); a higher value binds
tighter, so `1 + 2 * 3` parses as `(1 + 2) * 3` and `1 * 2 + 3` as
`1 * (2 + 3)`. Operators of equal power group to the left. Parsing stops,
leaving the cursor in place, at the first token that is not one of these
operators.

`get_nud_fn(kind)` and `get_led_fn(kind)` return the parse function for a token
in prefix or infix position, or raise `LookUpError`.

Parse failures raise a subclass of `ParserError` from `exprlang.parser_errors`:
`UnexpectedTokenError` when the tokens run out or a primary expression is not an
integer, and `InvalidExpressionError` for an integer literal beyond the signed
128-bit range. `MissingTokenError`, `ParserTypeError` and `ParserLookupError`
are also defined.

## What it does not do

Only integer literals can be parsed as operands: floats, identifiers, strings,
keywords, parentheses and unary operators are tokenized but not parsed. There
are no statements, no type checker behind `TypeVisitor`, and nothing evaluates
the expression tree.