from __future__ import annotations

# Public surface for the compiler package
from .register import Register
from .memory_address import Address, OffsetDereference, LabelDereference, MemAddr
from .instructions import (
    Instruction,
    Mov,
    MovSd,
    RegisterToRegister,
    ImmediateToRegister,
    RegisterToMem,
    ImmediateToMem,
    MemToRegister,
    MovSdMemToRegister,
)
from .value import DataRecord
from .assembly_builder import AssemblyBuilder
from .code_generator import CodeGenerator
from .pipeline import compile_source, run_compiler_pipeline

__all__ = [
    "Register",
    "Address",
    "OffsetDereference",
    "LabelDereference",
    "MemAddr",
    "Instruction",
    "Mov",
    "MovSd",
    "RegisterToRegister",
    "ImmediateToRegister",
    "RegisterToMem",
    "ImmediateToMem",
    "MemToRegister",
    "MovSdMemToRegister",
    "DataRecord",
    "AssemblyBuilder",
    "CodeGenerator",
    "compile_source",
    "run_compiler_pipeline",
]
