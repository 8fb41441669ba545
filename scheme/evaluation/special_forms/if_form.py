from scheme import EvaluatorFn, LispValue, SExpression
from scheme.errors import SchemeArityError, SchemeUnspecifiedReturn
from scheme.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SchemeArityError("if requires a condition, a consequent and an optional alternative")

    cond = evaluate_fn(tail[0], env)
    # Only #f is false; integers, lists and functions are all truthy
    if cond is not False:
        return evaluate_fn(tail[1], env)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env)
    raise SchemeUnspecifiedReturn("if without an alternative has no value when its condition is false")
