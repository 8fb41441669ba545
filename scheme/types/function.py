"""User-defined function values produced by `(define (name param...) body...)`."""

from __future__ import annotations

from io import StringIO

from scheme import SExpression
from scheme.types.symbol import Symbol


class Function:
    """A named function with formal parameters and an unevaluated body.

    No defining environment is captured: parameters are bound in a fresh frame
    pushed on top of whatever environment is active at the call site.
    """

    __slots__ = ("params", "body", "name")

    def __init__(
        self, params: list[Symbol], body: list[SExpression], name: Symbol | None = None
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.name: Symbol | None = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Function)
            and self.params == other.params
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash(tuple(self.params))

    def __str__(self) -> str:
        from scheme.printer import to_lisp_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for expr in self.body:
                buffer.write(" ")
                buffer.write(to_lisp_string(expr))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        if self.name is None:
            return f"<Function {self}>"
        return f"<Function {self.name} {self}>"
