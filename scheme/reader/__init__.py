from scheme.reader.lexer import Cursor, Token, TokenKind, lex
from scheme.reader.parser import Parser, read

__all__ = ["Cursor", "Token", "TokenKind", "lex", "Parser", "read"]
