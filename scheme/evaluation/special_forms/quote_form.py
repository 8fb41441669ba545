from scheme import EvaluatorFn, LispValue, SExpression
from scheme.errors import SchemeArityError
from scheme.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) -> expr, unevaluated"""
    if len(tail) != 1:
        raise SchemeArityError("quote requires exactly 1 argument")
    return tail[0]
