from scheme import EvaluatorFn, LispValue, SExpression
from scheme.errors import SchemeArityError, SchemeTypeError
from scheme.types.environment import Environment
from scheme.types.function import Function
from scheme.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)             -> binds the evaluated value
    (define (name param ...) body)  -> binds a Function; the body is kept unevaluated
    Both bind in the innermost frame and return the bound value.
    """
    if not tail:
        raise SchemeArityError("define requires a target")

    target, *rest = tail
    match target:
        case Symbol():
            if len(rest) != 1:
                raise SchemeArityError("define requires exactly 2 arguments")
            value = evaluate_fn(rest[0], env)
            env.bind(target, value)
            return value
        case [Symbol() as name, *params]:
            for p in params:
                if not isinstance(p, Symbol):
                    raise SchemeTypeError(f"Parameter {p!r} of {name} is not a symbol")
            fn = Function(list(params), list(rest), name)
            env.bind(name, fn)
            return fn
    raise SchemeTypeError(f"Cannot define {target!r}")
