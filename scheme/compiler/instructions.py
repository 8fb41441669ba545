"""Move instructions rendered in AT&T syntax: `mnemonic src, dst`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from scheme.compiler.memory_address import MemAddr
from scheme.compiler.register import Register


class Instruction:
    mnemonic: ClassVar[str]

    def __str__(self) -> str:
        return render_instruction(self)


class Mov(Instruction):
    """Integer/pointer width move."""
    mnemonic = "movq"


class MovSd(Instruction):
    """Scalar double move."""
    mnemonic = "movsd"


@dataclass(frozen=True)
class RegisterToRegister(Mov):
    src: Register
    dst: Register


@dataclass(frozen=True)
class ImmediateToRegister(Mov):
    src: int
    dst: Register


@dataclass(frozen=True)
class RegisterToMem(Mov):
    src: Register
    dst: MemAddr


@dataclass(frozen=True)
class ImmediateToMem(Mov):
    src: int
    dst: MemAddr


@dataclass(frozen=True)
class MemToRegister(Mov):
    src: MemAddr
    dst: Register


@dataclass(frozen=True)
class MovSdMemToRegister(MovSd):
    src: MemAddr
    dst: Register


def render_instruction(instr: Instruction) -> str:
    match instr:
        case ImmediateToRegister(src, dst) | ImmediateToMem(src, dst):
            operands = f"${src}, {dst}"
        case (
            RegisterToRegister(src, dst)
            | RegisterToMem(src, dst)
            | MemToRegister(src, dst)
            | MovSdMemToRegister(src, dst)
        ):
            operands = f"{src}, {dst}"
        case _:
            raise TypeError(f"Not a move instruction: {instr!r}")
    return f"{instr.mnemonic} {operands}"
