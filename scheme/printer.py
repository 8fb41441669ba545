"""Render values back to Scheme source text."""

from __future__ import annotations

from scheme import LispValue
from scheme.errors import SchemeRecursionError
from scheme.types.function import Function
from scheme.types.symbol import QUOTE, Symbol


def to_lisp_string(value: LispValue) -> str:
    try:
        return _render(value)
    except RecursionError as e:
        raise SchemeRecursionError("Value nested too deeply to print") from e


def _render(value: LispValue) -> str:
    match value:
        case True:
            return "#t"
        case False:
            return "#f"
        case int() | Symbol():
            return str(value)
        case [head, quoted] if head == QUOTE:
            return "'" + _render(quoted)
        case list():
            return "(" + " ".join(_render(v) for v in value) + ")"
        case Function(name=None):
            return "#<procedure>"
        case Function():
            return f"#<procedure {value.name}>"
    return repr(value)
