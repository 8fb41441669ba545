from __future__ import annotations

from enum import Enum


class Register(Enum):
    # General purpose
    RAX = "rax"
    RBX = "rbx"
    RCX = "rcx"
    RDX = "rdx"
    RSI = "rsi"
    RDI = "rdi"
    RSP = "rsp"
    RBP = "rbp"
    RIP = "rip"
    # Floating point
    XMM0 = "xmm0"

    def __str__(self) -> str:
        return f"%{self.value}"


# System V: integer results come back in %rax
RETURN_REGISTER = Register.RAX
