from __future__ import annotations

import logging

from scheme.compiler.assembly_builder import AssemblyBuilder
from scheme.compiler.instructions import ImmediateToRegister
from scheme.compiler.register import RETURN_REGISTER
from scheme.errors import SchemeLexError, SchemeUnsupportedLiteral
from scheme.reader.lexer import Cursor, Token, TokenKind

logger = logging.getLogger(__name__)

ANONYMOUS_FUNCTION_PREFIX = "__scheme__anonymous__function__"


class CodeGenerator:
    """
    Emits one anonymous function per top-level literal.
    Reads tokens straight from the lexer; the parser is not involved.
    """

    def __init__(self, lexer: Cursor | str, builder: AssemblyBuilder | None = None):
        if isinstance(lexer, str):
            lexer = Cursor(lexer, structural=False)
        self.lexer: Cursor = lexer
        self.builder: AssemblyBuilder = builder if builder is not None else AssemblyBuilder()
        self.function_count: int = 0

    def start(self) -> AssemblyBuilder:
        """Generate code until end of input and return the builder."""
        while True:
            tok = self.lexer.next_token()
            match tok.kind:
                case TokenKind.INT:
                    self.emit_int(tok.value)
                case TokenKind.FLOAT:
                    self.emit_float(tok)
                case TokenKind.BOOLEAN | TokenKind.CHAR:
                    raise SchemeUnsupportedLiteral(
                        f"Code generation for {tok.kind.name.lower()} literals is not supported yet"
                    )
                case TokenKind.EOF:
                    logger.debug("generated %d functions", self.function_count)
                    return self.builder
                case _:
                    raise SchemeLexError(f"Unknown token at position {self.lexer.pos}")

    def new_anonymous_function(self) -> str:
        name = f"{ANONYMOUS_FUNCTION_PREFIX}{self.function_count}"
        self.function_count += 1
        self.builder.new_function(name)
        return name

    def emit_int(self, value: int) -> None:
        name = self.new_anonymous_function()
        logger.debug("%s returns %d", name, value)
        self.builder.move(ImmediateToRegister(value, RETURN_REGISTER))
        self.builder.return_instr()

    def emit_float(self, tok: Token) -> None:
        """Register the float as data, then refuse: returning doubles in %xmm0 is not supported yet."""
        record = self.builder.new_constant(tok)
        raise SchemeUnsupportedLiteral(
            f"Code generation for float literal {tok.value} ({record.label}) is not supported yet"
        )

    def build(self) -> str:
        return self.builder.build()
