import pytest

from globmatch.lexer import Lexer, Token, TokenType, is_special

T = TokenType
ANY = (T.ANY, "*")
NOT = (T.NOT, "!")
SEP = (T.SEPARATOR, ",")
SINGLE = (T.SINGLE, "?")


def text(raw):
    return (T.TEXT, raw)


def span(lo, hi):
    return [(T.RANGE_LO, lo), (T.RANGE_BETWEEN, "-"), (T.RANGE_HI, hi)]


def rng(*inner):
    return [(T.RANGE_OPEN, "["), *inner, (T.RANGE_CLOSE, "]")]


def terms(*inner):
    return [(T.TERMS_OPEN, "{"), *inner, (T.TERMS_CLOSE, "}")]


CASES = [
    ("", []),
    ("hello", [text("hello")]),
    ("/{rate,[0-9]]}*", [text("/"), *terms(text("rate"), SEP, *rng(*span("0", "9")), text("]")), ANY]),
    ("hello,world", [text("hello,world")]),
    ("hello\\,world", [text("hello,world")]),
    ("hello\\{world", [text("hello{world")]),
    ("hello?", [text("hello"), SINGLE]),
    ("hellof*", [text("hellof"), ANY]),
    ("hello**", [text("hello"), (T.SUPER, "**")]),
    ("[日-語]", rng(*span("日", "語"))),
    ("[!日-語]", rng(NOT, *span("日", "語"))),
    ("[日本語]", rng(text("日本語"))),
    ("[!日本語]", rng(NOT, text("日本語"))),
    ("{a,b}", terms(text("a"), SEP, text("b"))),
    ("/{z,ab}*", [text("/"), *terms(text("z"), SEP, text("ab")), ANY]),
    (
        "{[!日-語],*,?,{a,b,\\c}}",
        terms(
            *rng(NOT, *span("日", "語")),
            SEP,
            ANY,
            SEP,
            SINGLE,
            SEP,
            *terms(text("a"), SEP, text("b"), SEP, text("c")),
        ),
    ),
]


def expected_tokens(items):
    return [Token(kind, raw) for kind, raw in items] + [Token(T.EOF, "")]


@pytest.mark.parametrize("pattern, items", CASES)
def test_lexer_iteration(pattern, items):
    assert list(Lexer(pattern)) == expected_tokens(items)


@pytest.mark.parametrize("pattern, items", CASES)
def test_lexer_next_token(pattern, items):
    expected = expected_tokens(items)
    lexer = Lexer(pattern)
    assert [lexer.next_token() for _ in expected] == expected


def test_eof_repeats():
    lexer = Lexer("a")
    assert lexer.next_token() == Token(T.TEXT, "a")
    assert lexer.next_token().kind is T.EOF
    assert lexer.next_token().kind is T.EOF


def test_unterminated_range_is_an_error():
    assert list(Lexer("[a")) == [Token(T.ERROR, "unexpected end of input")]


def test_range_without_close_is_an_error():
    lexer = Lexer("[a-bc]")
    error = Token(T.ERROR, "expected close range character")
    assert [lexer.next_token(), lexer.next_token()] == [error, error]


def test_close_brace_outside_terms_is_text():
    assert list(Lexer("a}b")) == expected_tokens([text("a}b")])


def test_trailing_escape_is_dropped():
    assert list(Lexer("ab\\")) == expected_tokens([text("ab")])


def test_token_str_names_kind():
    assert str(Token(T.RANGE_OPEN, "[")).startswith("range_open<")
    assert str(T.TERMS_CLOSE) == "terms_close"


@pytest.mark.parametrize("c", list("*?\\[]{}"))
def test_is_special_true(c):
    assert is_special(c) is True


@pytest.mark.parametrize("c", ["a", ",", "!", "-", "", "*?"])
def test_is_special_false(c):
    assert is_special(c) is False