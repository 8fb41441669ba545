"""Accumulates assembly code lines and data records and renders them as text.

Construction is append-only. Opening and returning from functions is only
counted while building; the count is validated once, in `build()`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from scheme.compiler.instructions import Instruction
from scheme.compiler.value import DataRecord
from scheme.errors import SchemeAssemblyError
from scheme.reader.lexer import Token, TokenKind

INDENT = " " * 8

DATA_KINDS = (TokenKind.INT, TokenKind.FLOAT, TokenKind.BOOLEAN, TokenKind.CHAR)


def is_unindented(line: str) -> bool:
    """Directives and labels start in column 0."""
    return line.startswith(".") or line.endswith(":")


def format_line(line: str) -> str:
    return line if is_unindented(line) else INDENT + line


class AssemblyBuilder:
    def __init__(self):
        self.code: list[str] = []
        self.data: list[DataRecord] = []
        self.nest_count: int = 0

    def add(self, line: str) -> None:
        self.code.append(line)

    def new_function(self, name: str) -> None:
        self.add(f".global {name}")
        self.add(f".type {name}, @function")
        self.add(f"{name}:")
        self.nest_count += 1

    def move(self, instr: Instruction) -> None:
        self.add(str(instr))

    def return_instr(self) -> None:
        self.add("ret")
        self.nest_count -= 1

    @contextmanager
    def function(self, name: str) -> Iterator[AssemblyBuilder]:
        """Open `name` and emit its `ret` when the block completes."""
        self.new_function(name)
        yield self
        self.return_instr()

    def new_constant(self, literal: Token) -> DataRecord:
        if literal.kind not in DATA_KINDS:
            raise SchemeAssemblyError(f"Cannot store {literal!r} as data")
        record = DataRecord(literal, f"LC_{len(self.data)}")
        self.data.append(record)
        return record

    def validate(self) -> None:
        if self.nest_count != 0:
            raise SchemeAssemblyError(
                f"Unbalanced functions (nest count {self.nest_count}): "
                "every new_function needs a matching return_instr before build"
            )

    def build(self) -> str:
        self.validate()
        parts = [format_line(line) + "\n" for line in self.code]
        parts.extend(str(record) for record in self.data)
        return "".join(parts)
