"""
  Recursive-descent parser

Consumes tokens from a Cursor and emits Python primitives:

    - atoms    -> Symbol
    - lists    -> Python list
    - integers -> int
    - booleans -> bool
    - 'expr    -> [Symbol("quote"), expr]

Floats and characters are lexed but have no AST representation yet; they are
rejected with SchemeUnsupportedLiteral instead of being dropped.
"""

from __future__ import annotations

from typing import Iterator

from scheme import SExpression
from scheme.errors import SchemeLexError, SchemeParseError, SchemeUnsupportedLiteral
from scheme.reader.lexer import Cursor, Token, TokenKind
from scheme.types.symbol import QUOTE, Symbol


class Parser:
    def __init__(self, source: str | Cursor):
        self.lexer: Cursor = source if isinstance(source, Cursor) else Cursor(source)
        self._lookahead: Token | None = None

    def _advance(self) -> Token:
        if self._lookahead is not None:
            tok, self._lookahead = self._lookahead, None
            return tok
        return self.lexer.next_token()

    def _peek(self) -> Token:
        if self._lookahead is None:
            self._lookahead = self.lexer.next_token()
        return self._lookahead

    def at_eof(self) -> bool:
        return self._peek().kind is TokenKind.EOF

    def parse(self) -> SExpression:
        """Parse exactly one expression and leave the cursor right after it."""
        return self._parse_token(self._advance())

    def _parse_token(self, tok: Token) -> SExpression:
        match tok.kind:
            case TokenKind.LPAREN:
                return self._parse_list()
            case TokenKind.QUOTE:
                if self.at_eof():
                    raise SchemeParseError("Expected an expression after quote")
                return [QUOTE, self.parse()]
            case TokenKind.ATOM:
                return Symbol(tok.value)
            case TokenKind.INT | TokenKind.BOOLEAN:
                return tok.value
            case TokenKind.FLOAT:
                raise SchemeUnsupportedLiteral(f"Float literal {tok.value} is not supported yet")
            case TokenKind.CHAR:
                raise SchemeUnsupportedLiteral(f"Character literal #\\{tok.value} is not supported yet")
            case TokenKind.RPAREN:
                raise SchemeParseError("Unexpected ')'")
            case TokenKind.UNKNOWN:
                raise SchemeLexError(f"Unknown token at position {self.lexer.pos}")
            case TokenKind.EOF:
                raise SchemeParseError("Unexpected end of input")
        raise SchemeParseError(f"Unknown token: {tok!r}")

    def _parse_list(self) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok = self._advance()
            if tok.kind is TokenKind.RPAREN:
                return items
            if tok.kind is TokenKind.EOF:
                raise SchemeParseError("Unmatched '('")
            items.append(self._parse_token(tok))

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_eof():
            yield self.parse()


def read(source: str) -> SExpression:
    """Parse a single expression from `source`."""
    return Parser(source).parse()
