from __future__ import annotations

import struct
from dataclasses import dataclass

from scheme.compiler.memory_address import LabelDereference
from scheme.compiler.register import Register
from scheme.errors import SchemeAssemblyError
from scheme.reader.lexer import Token, TokenKind


def float_bits(f: float) -> int:
    """IEEE-754 bit pattern of a double."""
    return struct.unpack("<Q", struct.pack("<d", f))[0]


@dataclass
class DataRecord:
    """A labelled constant destined for the data section."""

    literal: Token
    label: str

    def address(self) -> LabelDereference:
        return LabelDereference(self.label, Register.RIP)

    def directive(self) -> str:
        match self.literal:
            case Token(TokenKind.INT, i):
                return f".quad   {i}"
            case Token(TokenKind.FLOAT, f):
                return f".quad   {float_bits(f):#x}"
            case Token(TokenKind.BOOLEAN, b):
                return f".byte   {int(b)}"
            case Token(TokenKind.CHAR, c):
                return f".long {ord(c)}"
        raise SchemeAssemblyError(f"Cannot store {self.literal!r} as data")

    def __str__(self) -> str:
        return f"{self.label}:\n    {self.directive()}\n"
