import pytest

from scheme.errors import SchemeArityError, SchemeTypeError
from scheme.evaluation.evaluator import evaluate
from scheme.types.symbol import Symbol


def test_quote_list(env):
    expr = [Symbol("quote"), [1, 2, 3]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_quote_symbol_is_not_looked_up(env):
    assert evaluate([Symbol("quote"), Symbol("x")], env) == Symbol("x")


def test_quote_keeps_nested_forms_unevaluated(interp):
    assert interp.interpret("'(+ 1 2)") == [Symbol("+"), 1, 2]
    assert interp.interpret("''a") == [Symbol("quote"), Symbol("a")]


@pytest.mark.parametrize("source", ["(quote)", "(quote 1 2)"])
def test_quote_arity(interp, source):
    with pytest.raises(SchemeArityError):
        interp.interpret(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(1 2 3))", 1),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(cdr '(1))", []),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(cons 1 '())", [1]),
        ("(cons '(1) '(2))", [[1], 2]),
        ("(car (cdr '(1 2 3)))", 2),
        ("(car '((a b) c))", [Symbol("a"), Symbol("b")]),
    ]
)
def test_list_primitives(interp, source, expected):
    assert interp.interpret(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(car 1)", SchemeTypeError),
        ("(car '())", SchemeTypeError),
        ("(cdr '())", SchemeTypeError),
        ("(car '(1) '(2))", SchemeTypeError),
        ("(cons 1 2)", SchemeTypeError),
        ("(cons 1)", SchemeArityError),
        ("(cons 1 '() '())", SchemeArityError),
    ]
)
def test_list_primitive_errors(interp, source, error):
    with pytest.raises(error):
        interp.interpret(source)


def test_cons_does_not_mutate_operand(interp):
    interp.interpret("(define xs '(2 3))")
    assert interp.interpret("(cons 1 xs)") == [1, 2, 3]
    assert interp.interpret("xs") == [2, 3]
