"""Application engine.

Resolves the operator of an application and invokes it on already-evaluated
operands:
- a user-defined Function bound in the environment;
- otherwise a primitive procedure from the fixed table.
"""

from __future__ import annotations

from scheme import EvaluatorFn, LispValue, SExpression
from scheme.errors import (
    SchemeArityError,
    SchemeTypeError,
    SchemeUnboundName,
    SchemeUnspecifiedReturn,
)
from scheme.evaluation.primitives import lookup_primitive
from scheme.types.environment import Environment
from scheme.types.function import Function
from scheme.types.symbol import Symbol


def apply_function(
    fn: Function,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined Function.

    Parameters are bound in a fresh frame on top of the caller's environment;
    the frame is popped again even when the body raises. Only the first body
    expression is evaluated.
    """
    if len(args) != fn.arity:
        raise SchemeArityError(
            f"{fn.name or 'function'} expects {fn.arity} arguments, got {len(args)}"
        )
    if not fn.body:
        raise SchemeUnspecifiedReturn(f"{fn.name or 'function'} has an empty body")

    with env.frame():
        for param, arg in zip(fn.params, args):
            env.bind(param, arg)
        return evaluate_fn(fn.body[0], env)


def apply(
    head: SExpression,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the operator named by `head` to `args`."""
    if not isinstance(head, Symbol):
        raise SchemeTypeError(f"{head!r} is not applicable to {args!r}")

    bound = env.lookup(head)
    if isinstance(bound, Function):
        return apply_function(bound, args, env, evaluate_fn)
    if bound is not None:
        raise SchemeTypeError(f"Cannot apply non-function {bound!r}")

    primitive = lookup_primitive(head.id)
    if primitive is None:
        raise SchemeUnboundName(f"Unknown procedure {head}")
    return primitive(args)
