import pytest

from lispy_lsp.indexer import build_index, callee_before, position_from_offset, word_at


def test_let_and_lambda_bindings_are_indexed():
    text = "(let add\n  (lambda (a b) (+ a b))\n  (add 1 2))"
    idx = build_index(text)
    assert set(idx.symbols) == {"add", "a", "b"}
    assert idx.symbols["add"].kind == "var"
    assert (idx.symbols["add"].line, idx.symbols["add"].col) == (0, 5)
    assert idx.symbols["a"].kind == "param"
    assert (idx.symbols["b"].line, idx.symbols["b"].col) == (1, 13)
    assert idx.problems == []


def test_first_binding_wins():
    idx = build_index("(let x 1 (let x 2 x))")
    assert idx.symbols["x"].col == 5


@pytest.mark.parametrize(
    "text,messages,balance",
    [
        ("(+ 1 2)", [], 0),
        ("(+ 1 (* 2 3)", ["Unmatched '('"], 1),
        ("(+ 1 2))", ["Unexpected ')'"], 0),
        (")(", ["Unexpected ')'", "Unmatched '('"], 1),
    ],
)
def test_paren_problems(text, messages, balance):
    idx = build_index(text)
    assert [p.message for p in idx.problems] == messages
    assert idx.paren_balance == balance


def test_problem_positions():
    idx = build_index("(ok)\n  (broken")
    [problem] = idx.problems
    assert (problem.line, problem.col) == (1, 2)


def test_partial_buffers_do_not_fail():
    for text in ["(let", "(lambda", "(lambda (a", "(let )"]:
        build_index(text)


def test_position_from_offset():
    assert position_from_offset("ab\ncd", 4) == (1, 1)
    assert position_from_offset("ab", 1) == (0, 1)


def test_word_at():
    text = "(let x 1\n  (>= x 0))"
    assert word_at(text, 1, 4) == ">="
    assert word_at(text, 0, 5) == "x"
    assert word_at(text, 0, 0) is None
    assert word_at(text, 5, 0) is None


def test_callee_before():
    assert callee_before("(+ 1 (* 2") == "*"
    assert callee_before("(") is None
    assert callee_before("no parens") is None
