import pytest
from hypothesis import given, strategies as st

from tinylisp.types.errors import LispUnexpectedCloseParen, LispUnexpectedEOF
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import is_equal, render
from tinylisp.reader.lexer import Token, TokenKind, classify, lex, tokenize
from tinylisp.reader.parser import TokenStream, parse, parse_program, read_program

K = TokenKind


def _kinds(source):
    return [(t.kind, t.text) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(K.IDENTIFIER, "a")]),
        ("(+ 1 2)", [(K.OPEN_PAREN, "("), (K.IDENTIFIER, "+"), (K.NUMBER, "1"), (K.NUMBER, "2"), (K.CLOSE_PAREN, ")")]),
        ('"hello world"', [(K.STRING, "hello world")]),
        ('"a \\"b\\""', [(K.STRING, 'a "b"')]),
        ('"back\\\\slash"', [(K.STRING, "back\\slash")]),
        ('"\\n"', [(K.STRING, "n")]),
        ('"(not a list)"', [(K.STRING, "(not a list)")]),
        ('""', [(K.STRING, "")]),
        ("true false nil", [(K.BOOLEAN, "true"), (K.BOOLEAN, "false"), (K.NIL, "nil")]),
        ("3.14 -2 -.5 +7 1.e3", [(K.FLOAT, "3.14"), (K.NUMBER, "-2"), (K.FLOAT, "-.5"), (K.NUMBER, "+7"), (K.FLOAT, "1.e3")]),
        ("1e5 inf nan - 1_000", [(K.IDENTIFIER, "1e5"), (K.IDENTIFIER, "inf"), (K.IDENTIFIER, "nan"), (K.IDENTIFIER, "-"), (K.IDENTIFIER, "1_000")]),
        ("abc(def)", [(K.IDENTIFIER, "abc"), (K.OPEN_PAREN, "("), (K.IDENTIFIER, "def"), (K.CLOSE_PAREN, ")")]),
        ("a\\b", [(K.IDENTIFIER, "a\\b")]),
        ('"unterminated', [(K.IDENTIFIER, '"unterminated')]),
        ("  \n\t ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert _kinds(source) == expected


def test_lexer_positions():
    tokens = tokenize("(a\n  bc)")
    assert [(t.text, t.line, t.column) for t in tokens] == [
        ("(", 1, 1),
        ("a", 1, 2),
        ("bc", 2, 3),
        (")", 2, 5),
    ]


def test_string_token_position_is_opening_quote():
    (token,) = tokenize(' "hi"')
    assert token == Token(TokenKind.STRING, "hi", 1, 2)


def test_lex_is_lazy_and_restartable():
    gen = lex("(a b)")
    assert next(gen).kind is TokenKind.OPEN_PAREN
    # A fresh call starts over from the beginning
    assert tokenize("(a b)") == tokenize("(a b)")


@pytest.mark.parametrize(
    "lexeme,kind",
    [("true", K.BOOLEAN), ("nil", K.NIL), ("42", K.NUMBER), ("4.2", K.FLOAT), ("x42", K.IDENTIFIER)],
)
def test_classify(lexeme, kind):
    assert classify(lexeme) is kind


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("true", True),
        ("false", False),
        ("foo", Symbol("foo")),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a (b 1) ())", [Symbol("a"), [Symbol("b"), 1], []]),
    ]
)
def test_parser(source, expected):
    value, rest = parse(tokenize(source))
    assert is_equal(value, expected)
    assert rest == []


def test_parse_returns_remaining_tokens():
    value, rest = parse(tokenize("(a) b (c)"))
    assert value == [Symbol("a")]
    assert [t.text for t in rest] == ["b", "(", "c", ")"]


def test_parse_empty_token_sequence():
    with pytest.raises(LispUnexpectedEOF):
        parse([])


def test_parse_lone_close_paren():
    with pytest.raises(LispUnexpectedCloseParen) as info:
        parse(tokenize(")"))
    assert (info.value.line, info.value.column) == (1, 1)


def test_parse_unclosed_list_points_at_open_paren():
    with pytest.raises(LispUnexpectedEOF) as info:
        parse(tokenize("\n  (a (b)"))
    assert (info.value.line, info.value.column) == (2, 3)


def test_parse_program_yields_top_level_expressions():
    program = read_program("(+ 1 2)\n(* 3 4) x")
    assert program == [
        [Symbol("+"), 1, 2],
        [Symbol("*"), 3, 4],
        Symbol("x"),
    ]


def test_parse_program_of_empty_source():
    assert parse_program(tokenize("   ")) == []


def test_parse_program_stray_close_paren():
    with pytest.raises(LispUnexpectedCloseParen) as info:
        read_program("(a))")
    assert info.value.column == 4


def test_token_stream_parse_all():
    stream = TokenStream(lex("1 (2) 3"))
    assert list(stream.parse_all()) == [1, [2], 3]


def test_reparse_is_structurally_equal():
    tokens = tokenize('(defun f (x) (concat "a" x))')
    assert parse(tokens)[0] == parse(tokens)[0]


# Values without a floating-point component survive render -> tokenize -> parse
IDENTIFIERS = st.from_regex(r"[a-zA-Z*+!?<>=/_-][a-zA-Z0-9*+!?<>=/_-]{0,8}", fullmatch=True).filter(
    lambda s: classify(s) is TokenKind.IDENTIFIER
)

SCALARS = st.one_of(
    st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1),
    st.text(max_size=12),
    st.booleans(),
    st.just(Nil),
    IDENTIFIERS.map(Symbol),
)

VALUES = st.recursive(SCALARS, lambda children: st.lists(children, max_size=5), max_leaves=20)


@given(VALUES)
def test_render_parse_round_trip(value):
    parsed, rest = parse(tokenize(render(value)))
    assert rest == []
    assert is_equal(parsed, value)
