"""Core evaluator for the interpreter.

One recursive evaluation step per call: atoms are looked up, literals are
self-evaluating, special forms are dispatched through SPECIAL_FORMS and every
other list is an application whose operands are evaluated left to right.
"""

from __future__ import annotations

from scheme import LispValue, SExpression
from scheme.errors import SchemeTypeError
from scheme.evaluation.apply import apply
from scheme.evaluation.special_forms import SPECIAL_FORMS
from scheme.types.environment import Environment
from scheme.types.function import Function
from scheme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.resolve(expr)
        case bool() | int() | Function():
            return expr
        case []:
            return []
        case [head, *tail]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)
            args = [evaluate(arg, env) for arg in tail]
            return apply(head, args, env, evaluate)
    raise SchemeTypeError(f"Cannot evaluate {expr!r}")
