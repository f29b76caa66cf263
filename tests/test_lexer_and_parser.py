from collections import deque

import pytest

from lispy.types.errors import ParseError
from lispy.types.expression import List, Number, Symbol, render
from lispy.reader.parser import Token, TokenStream, lex, parse, parse_all, tokenize


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("a", ["a"]),
        ("  a   b ", ["a", "b"]),
        ("((a b) c)", ["(", "(", "a", "b", ")", "c", ")"]),
        ("(let x 3 (* x 4))", ["(", "let", "x", "3", "(", "*", "x", "4", ")", ")"]),
        ("foo(bar)baz", ["foo", "(", "bar", ")", "baz"]),
        ("(\n+\t1 2)", ["(", "+", "1", "2", ")"]),
        (")(", [")", "("]),
        ("", []),
        ("   ", []),
    ]
)
def test_tokenize(source, expected):
    assert list(tokenize(source)) == expected


def test_lex_offsets():
    assert list(lex("(ab 12)")) == [
        Token("(", 0),
        Token("ab", 1),
        Token("12", 4),
        Token(")", 6),
    ]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Number(123)),
        ("-45", Number(-45)),
        ("+7", Number(7)),
        ("0", Number(0)),
        ("x", Symbol("x")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("12abc", Symbol("12abc")),
        ("1.5", Symbol("1.5")),
        ("()", List()),
        ("(a b c)", List((Symbol("a"), Symbol("b"), Symbol("c")))),
        ("(1 (2 3))", List((Number(1), List((Number(2), Number(3)))))),
    ]
)
def test_parser(source, expected):
    assert parse(tokenize(source)) == expected


def test_parsed_literal_list_renders_as_numbers():
    expr = parse(tokenize("(1 2 3)"))
    assert isinstance(expr, List)
    assert list(expr) == [Number(1), Number(2), Number(3)]
    assert render(expr) == "(Number(1), Number(2), Number(3))"


def test_parse_consumes_tokens_from_the_front():
    tokens = tokenize("(a b) c")
    assert parse(tokens) == List((Symbol("a"), Symbol("b")))
    assert list(tokens) == ["c"]
    assert parse(tokens) == Symbol("c")
    assert not tokens


def test_parse_all_yields_each_top_level_form():
    forms = list(parse_all(tokenize("1 (x) y")))
    assert forms == [Number(1), List((Symbol("x"),)), Symbol("y")]


@pytest.mark.parametrize("source", ["", "   ", "(", "(a (b c)", "((("])
def test_exhausted_input_is_a_parse_error(source):
    with pytest.raises(ParseError):
        parse(tokenize(source))


def test_stray_close_paren_reports_offset():
    with pytest.raises(ParseError) as exc_info:
        TokenStream.from_source("  )").parse_expr()
    assert exc_info.value.offset == 2


def test_unmatched_open_paren_reports_offset_of_open():
    with pytest.raises(ParseError) as exc_info:
        TokenStream.from_source("(a (b)").parse_expr()
    assert exc_info.value.offset == 0


def test_plain_token_list_is_accepted():
    assert parse(["(", "+", "1", "2", ")"]) == List((Symbol("+"), Number(1), Number(2)))


def test_token_stream_accepts_deque_in_place():
    tokens = deque(["1", "2"])
    stream = TokenStream(tokens)
    stream.parse_expr()
    assert list(tokens) == ["2"]


def test_nesting_deeper_than_the_stack_is_a_parse_error():
    with pytest.raises(ParseError, match="nesting too deep") as exc_info:
        parse(lex("  " + "(" * 50000 + ")" * 50000))
    assert exc_info.value.offset == 2


@pytest.mark.parametrize("source", ["42", "x", "(a (1 b) ())"])
def test_str_matches_render(source):
    expr = parse(lex(source))
    assert str(expr) == render(expr)
