"""Primitive procedures.

The set is fixed and keyed by name. `lookup_primitive` is a pure function, so
there is no registry to mutate and primitives stay stateless.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Optional

from scheme import LispValue, PrimitiveFn
from scheme.errors import SchemeArityError, SchemeOverflowError, SchemeTypeError
from scheme.reader.lexer import INT64_MAX, INT64_MIN


def is_integer(v: LispValue) -> bool:
    # bool is an int subclass but a distinct kind here
    return isinstance(v, int) and not isinstance(v, bool)


def _checked(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise SchemeOverflowError(f"Integer overflow: {value}")
    return value


def _lift(name: str, f: Callable[[int, int], int]) -> Callable[[int, LispValue], int]:
    def step(acc: int, v: LispValue) -> int:
        if not is_integer(v):
            raise SchemeTypeError(f"Cannot apply {name} to {v!r}")
        return _checked(f(acc, v))
    return step


def _fold(name: str, f: Callable[[int, int], int], identity: int) -> PrimitiveFn:
    step = _lift(name, f)
    return lambda args: reduce(step, args, identity)


add = _fold("+", lambda a, b: a + b, 0)
mul = _fold("*", lambda a, b: a * b, 1)


def sub(args: list[LispValue]) -> int:
    if not args:
        raise SchemeArityError("- requires at least 1 argument")
    first, *rest = args
    if not is_integer(first):
        raise SchemeTypeError(f"Cannot apply - to {first!r}")
    return reduce(_lift("-", lambda a, b: a - b), rest, first)


def _single_list(name: str, args: list[LispValue]) -> list[LispValue]:
    match args:
        case [[_, *_] as lst]:
            return lst
        case [[]]:
            raise SchemeTypeError(f"Cannot take {name} of empty list")
        case [other]:
            raise SchemeTypeError(f"Cannot take {name} of non-list {other!r}")
    raise SchemeTypeError(f"{name} expects a single list, got {len(args)} arguments")


def car(args: list[LispValue]) -> LispValue:
    return _single_list("car", args)[0]


def cdr(args: list[LispValue]) -> list[LispValue]:
    return _single_list("cdr", args)[1:]


def cons(args: list[LispValue]) -> list[LispValue]:
    if len(args) != 2:
        raise SchemeArityError(f"cons requires exactly 2 arguments, got {len(args)}")
    head, tail = args
    if not isinstance(tail, list):
        raise SchemeTypeError(f"Cannot cons onto non-list {tail!r}")
    return [head, *tail]


def equals(args: list[LispValue]) -> bool:
    for v in args:
        if not is_integer(v):
            raise SchemeTypeError(f"Cannot compare non-integer {v!r}")
    return all(a == b for a, b in zip(args, args[1:]))


def lookup_primitive(name: str) -> Optional[PrimitiveFn]:
    """Return the primitive procedure called `name`, or None."""
    match name:
        case "+":
            return add
        case "*":
            return mul
        case "-":
            return sub
        case "car":
            return car
        case "cdr":
            return cdr
        case "cons":
            return cons
        case "=" | "eq?":
            return equals
    return None


PRIMITIVE_NAMES = ("+", "*", "-", "car", "cdr", "cons", "=", "eq?")
