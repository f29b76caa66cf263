import pytest

from lispy.types.environment import Environment
from lispy.types.errors import ArityError, NotCallableError, ParseError, UnboundSymbolError
from lispy.types.expression import Lambda, List, Number, SpecialForm, Symbol
from lispy.evaluation.evaluator import eval_string, evaluate

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def bare_env():
    env = Environment()
    env.define("x", Number(42))
    env.define("y", Number(100))
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_values(bare_env):
    assert evaluate(Number(1), bare_env) == Number(1)
    fn = Lambda(("a",), Symbol("a"), bare_env)
    assert evaluate(fn, bare_env) is fn
    form = SpecialForm("quote", 1, lambda tail, env, evaluate_fn: tail[0])
    assert evaluate(form, bare_env) is form


def test_symbol_lookup(bare_env):
    assert evaluate(Symbol("x"), bare_env) == Number(42)
    assert evaluate(Symbol("y"), bare_env) == Number(100)
    with pytest.raises(UnboundSymbolError):
        evaluate(Symbol("z"), bare_env)


def test_empty_list_evaluates_to_itself(bare_env):
    assert evaluate(List(), bare_env) == List()


def test_special_form_receives_operands_unevaluated(bare_env):
    bare_env.define("quote", SpecialForm("quote", 1, lambda tail, env, evaluate_fn: tail[0]))
    assert eval_string("(quote (undefined stuff))", bare_env) == List((Symbol("undefined"), Symbol("stuff")))


def test_lambda_value_in_head_position(bare_env):
    fn = Lambda(("a",), Symbol("a"), bare_env)
    assert evaluate(List((fn, Number(5))), bare_env) == Number(5)


def test_native_lambda_receives_evaluated_arguments(bare_env):
    seen = []

    def native(a, b):
        seen.append((a, b))
        return a

    bare_env.define("first", Lambda(("a", "b"), native=native, name="first"))
    assert eval_string("(first x y)", bare_env) == Number(42)
    assert seen == [(Number(42), Number(100))]


@pytest.mark.parametrize("source", ["(1 2 3)", "(x 1)", "((1) 2)"])
def test_calling_a_non_callable_fails(bare_env, source):
    with pytest.raises(NotCallableError):
        eval_string(source, bare_env)


def test_closure_arity_is_checked(env):
    with pytest.raises(ArityError):
        eval_string("((lambda (x y) (+ x y)) 1)", env)
    with pytest.raises(ArityError):
        eval_string("((lambda (x y) (+ x y)) 1 2 3)", env)


def test_arguments_evaluated_left_to_right_in_calling_env(env):
    # The first argument fails before the second is looked at.
    with pytest.raises(UnboundSymbolError) as exc_info:
        eval_string("(+ first_missing second_missing)", env)
    assert exc_info.value.name == "first_missing"


def test_eval_string_rejects_trailing_input(env):
    with pytest.raises(ParseError):
        eval_string("(+ 1 2) 3", env)


def test_eval_string_rejects_empty_input(env):
    with pytest.raises(ParseError):
        eval_string("", env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ (* 5 3) 20)", Number(35)),
        ("(if (> 6 3) 20 (/ 5 0))", Number(20)),
        ("(let x 3 (let x 7 (* x 4)))", Number(28)),
        ("(let x 3 (* x 4))", Number(12)),
        ("(let myfun (lambda (x y) (+ x y)) (myfun 4 5))", Number(9)),
        ("(! 0)", Number(1)),
        ("(>= 3 0)", Number(1)),
        ("(<= 1 2)", Number(1)),
    ]
)
def test_example_programs(env, source, expected):
    assert eval_string(source, env) == expected
