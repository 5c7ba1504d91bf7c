import pytest

from egg.errors import EggArityError, EggReferenceError, EggSyntaxError, EggTypeError
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse
from egg.types.expression import Apply, Value, Word
from egg.types.function import Builtin, Function

# -----------------------------------------------------
# Helpers
# -----------------------------------------------------

def run_in(env, source):
    return evaluate(parse(source), env)

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(Value(1.0), env) == 1
    assert evaluate(Value("hello"), env) == "hello"


def test_word_lookup(env):
    env.define("x", 42.0)
    assert evaluate(Word("x"), env) == 42
    with pytest.raises(EggReferenceError, match="z"):
        evaluate(Word("z"), env)


def test_simple_application(env):
    expr = Apply(Word("+"), (Value(1.0), Value(2.0)))
    assert evaluate(expr, env) == 3


def test_nested_application(env):
    assert run_in(env, "*(+(1, 2), -(10, 4))") == 18


def test_arguments_evaluated_left_to_right(env, capsys):
    run_in(env, "array(print(1), print(2), print(3))")
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_applying_a_non_function(env):
    with pytest.raises(EggTypeError, match="non-function"):
        run_in(env, "5(1)")
    with pytest.raises(EggTypeError, match="non-function"):
        run_in(env, '"text"()')


def test_non_function_error_happens_before_arguments(env, capsys):
    env.define("n", 1.0)
    with pytest.raises(EggTypeError):
        run_in(env, "n(print(1))")
    assert capsys.readouterr().out == ""


def test_operator_may_be_any_expression(env):
    assert run_in(env, "fun(x, *(x, 2))(21)") == 42
    assert run_in(env, "if(true, +, -)(5, 3)") == 8


def test_builtin_wrong_arity_is_type_error(env):
    with pytest.raises(EggArityError):
        run_in(env, "+(1)")
    with pytest.raises(EggTypeError):
        run_in(env, "print(1, 2)")


def test_special_forms_cannot_be_shadowed(env):
    # `if` stays a special form even after a binding with that name exists
    run_in(env, "define(if, 1)")
    assert run_in(env, "if(false, 1, 2)") == 2


def test_special_form_name_as_plain_word_is_a_variable(env):
    with pytest.raises(EggReferenceError):
        run_in(env, "do")


def test_special_form_shape_errors(env):
    with pytest.raises(EggSyntaxError):
        run_in(env, "define()")
    with pytest.raises(EggSyntaxError):
        run_in(env, "if(true, 1)")


def test_functions_are_values(env):
    f = run_in(env, "fun(a, b, +(a, b))")
    assert isinstance(f, Function)
    assert f.params == ("a", "b")
    assert str(f) == "fun(a, b, +(a, b))"
    assert isinstance(run_in(env, "+"), Builtin)


def test_evaluation_never_mutates_tree(env):
    expr = parse("do(define(x, 1), set(x, +(x, 1)), x)")
    before = str(expr)
    assert evaluate(expr, env) == 2
    assert str(expr) == before
    assert evaluate(expr, env.root().child()) == 2


def test_deep_recursion_exhausts_host_stack(env):
    run_in(env, "define(down, fun(n, if(==(n, 0), 0, down(-(n, 1)))))")
    with pytest.raises(RecursionError):
        run_in(env, "down(1000000)")
