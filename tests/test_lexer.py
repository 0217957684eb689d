import pytest

from exprlang.lexer import Lexer, tokenize
from exprlang.lexer_errors import (
    InvalidCharacterError,
    LexerError,
    UnexpectedEOFError,
    UnterminatedStringError,
)
from exprlang.tokens import TokenKind


def kinds(tokens):
    return [t.kind for t in tokens]


def values(tokens):
    return [t.value for t in tokens]


def test_empty_input_has_no_tokens():
    assert tokenize("", "empty.lang") == []


def test_simple_addition():
    tokens = tokenize("1 + 2", "t.lang")
    assert kinds(tokens) == [TokenKind.INTEGER, TokenKind.PLUS, TokenKind.INTEGER]
    assert values(tokens) == ["1", "+", "2"]


def test_keywords_and_identifiers():
    tokens = tokenize("if else while for func return foo", "t.lang")
    assert kinds(tokens) == [
        TokenKind.IF,
        TokenKind.ELSE,
        TokenKind.WHILE,
        TokenKind.FOR,
        TokenKind.FUNCTION,
        TokenKind.RETURN,
        TokenKind.IDENTIFIER,
    ]


@pytest.mark.parametrize("text", ["3.14", ".5", "7."])
def test_floats(text):
    tokens = tokenize(text, "t.lang")
    assert kinds(tokens) == [TokenKind.FLOAT]
    assert values(tokens) == [text]


def test_number_followed_by_identifier():
    tokens = tokenize("12abc", "t.lang")
    assert kinds(tokens) == [TokenKind.INTEGER, TokenKind.IDENTIFIER]
    assert values(tokens) == ["12", "abc"]


def test_identifier_with_digits_underscore_and_unicode():
    tokens = tokenize("abc123_x héllo", "t.lang")
    assert kinds(tokens) == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER]
    assert values(tokens) == ["abc123_x", "héllo"]


def test_all_symbols():
    text = "+-*/=%&|(){}[],;:!<>"
    tokens = tokenize(text, "t.lang")
    assert values(tokens) == list(text)
    assert kinds(tokens) == [
        TokenKind.PLUS,
        TokenKind.DASH,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.EQUAL,
        TokenKind.MODULO,
        TokenKind.AMPER,
        TokenKind.VERTICAL_BAR,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.COLON,
        TokenKind.NEGATION,
        TokenKind.LESS,
        TokenKind.GREATER,
    ]


def test_string_literal_keeps_quotes():
    tokens = tokenize('x = "hi there"', "t.lang")
    assert kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.EQUAL,
        TokenKind.LITERALSTRING,
    ]
    assert tokens[2].value == '"hi there"'


def test_spans_cover_lexemes_on_one_line():
    text = "total = (price * 12) + tax"
    tokens = tokenize(text, "t.lang")
    for token in tokens:
        assert token.span.start.line == token.span.end.line
        assert token.span.end.column - token.span.start.column == len(token.value)
        start = token.span.start.column - 1
        assert text[start : start + len(token.value)] == token.value


def test_spans_are_ordered():
    tokens = tokenize("a + b * c - d", "t.lang")
    for earlier, later in zip(tokens, tokens[1:]):
        assert earlier.span.end.column <= later.span.start.column


def test_newlines_advance_lines_and_reset_columns():
    tokens = tokenize("a\nb\n\nc", "t.lang")
    assert [t.span.start.line for t in tokens] == [1, 2, 4]
    assert {t.span.start.column for t in tokens} == {1}


def test_lexer_class_matches_function():
    text = "func f(x) { return x % 2; }"
    assert Lexer(text, "t.lang").tokenize() == tokenize(text, "t.lang")


def test_invalid_character():
    with pytest.raises(InvalidCharacterError) as info:
        tokenize("a $", "bad.lang")
    err = info.value
    assert err.character == "$"
    assert err.context == "a $"
    assert err.filename == "bad.lang"
    assert err.col == 3


def test_invalid_character_on_later_line():
    with pytest.raises(InvalidCharacterError) as info:
        tokenize("ok\n  #", "bad.lang")
    assert info.value.line == 2
    assert info.value.context == "  #"
    assert "invalid character #" in str(info.value)


@pytest.mark.parametrize("text, character", [("_x", "_"), ("a\tb", "\t"), ("x\r\n", "\r")])
def test_characters_that_start_no_token(text, character):
    with pytest.raises(InvalidCharacterError) as info:
        tokenize(text, "t.lang")
    assert info.value.character == character


@pytest.mark.parametrize("text", ["1.2.3", "."])
def test_malformed_numbers_raise(text):
    with pytest.raises(InvalidCharacterError) as info:
        tokenize(text, "t.lang")
    assert info.value.character == "."


def test_unterminated_string():
    with pytest.raises(UnterminatedStringError) as info:
        tokenize('"abc', "s.lang")
    assert info.value.context == '"abc'
    assert info.value.col == 1
    assert "Unterminated String literal" in str(info.value)


def test_string_cannot_span_lines():
    with pytest.raises(UnterminatedStringError) as info:
        tokenize('x = "ab\n"', "s.lang")
    assert info.value.context == 'x = "ab'


def test_triple_quoted_string_is_unexpected_eof():
    with pytest.raises(UnexpectedEOFError) as info:
        tokenize('"""doc"""', "s.lang")
    assert info.value.context == ""
    assert info.value.filename == "s.lang"


def test_all_lexer_errors_share_base_class():
    with pytest.raises(LexerError) as info:
        tokenize("1 @ 2", "t.lang")
    assert info.value.context == "1 @"