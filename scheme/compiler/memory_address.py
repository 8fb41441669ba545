from __future__ import annotations

from dataclasses import dataclass

from scheme.compiler.register import Register

_U64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class Address:
    """Absolute address, rendered as hex."""
    addr: int

    def __str__(self) -> str:
        return render_mem_addr(self)


@dataclass(frozen=True)
class OffsetDereference:
    """offset(%base)"""
    offset: int
    base: Register

    def __str__(self) -> str:
        return render_mem_addr(self)


@dataclass(frozen=True)
class LabelDereference:
    """label(%register), e.g. LC_0(%rip)"""
    label: str
    register: Register

    def __str__(self) -> str:
        return render_mem_addr(self)


MemAddr = Address | OffsetDereference | LabelDereference


def render_mem_addr(mem: MemAddr) -> str:
    match mem:
        case Address(addr):
            # negative addresses print as their two's complement bit pattern
            return f"{addr & _U64_MASK:#x}"
        case OffsetDereference(offset, base):
            return f"{offset}({base})"
        case LabelDereference(label, register):
            return f"{label}({register})"
    raise TypeError(f"Not a memory address: {mem!r}")
