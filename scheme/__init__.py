# Core type aliases for the Scheme data model.
# Plain Python types represent both code (forms) and runtime values:
#   atom -> Symbol, list -> list, integer -> int, boolean -> bool,
#   function -> Function.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Primitive procedure type: takes the evaluated operands
PrimitiveFn = Callable[[list], LispValue]

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
