"""
  Character-level lexer.

- Lazy: one token per `next_token()` call, nothing is buffered
- Never raises: malformed input becomes an UNKNOWN token and the consumer
  decides whether that is fatal
- Emits tagged tokens:

    - (  )  '           -> LPAREN, RPAREN, QUOTE
    - 123               -> INT
    - 1.25              -> FLOAT
    - #t #f             -> BOOLEAN
    - #\\c               -> CHAR
    - anything else     -> ATOM (structural mode) or UNKNOWN (literal mode)
    - end of input      -> EOF, repeatedly
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Iterator, NamedTuple, Optional

EOF_SYMBOL = "\0"

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT64_DIGITS = len(str(INT64_MAX))


class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    QUOTE = auto()
    ATOM = auto()
    INT = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    CHAR = auto()
    UNKNOWN = auto()
    EOF = auto()


class Token(NamedTuple):
    kind: TokenKind
    value: Any = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"


LPAREN = Token(TokenKind.LPAREN, "(")
RPAREN = Token(TokenKind.RPAREN, ")")
QUOTE = Token(TokenKind.QUOTE, "'")
UNKNOWN = Token(TokenKind.UNKNOWN)
EOF = Token(TokenKind.EOF)

STRUCTURAL = {"(": LPAREN, ")": RPAREN, "'": QUOTE}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Cursor:
    """Cursor over source text producing one token at a time.

    With `structural=False` only literal tokens are recognised; parens, quotes
    and identifiers come back as UNKNOWN. The code generator lexes this way.
    """

    __slots__ = ("text", "pos", "structural")

    def __init__(self, text: str, structural: bool = True):
        self.text = text
        self.pos = 0
        self.structural = structural

    # --- character primitives ---
    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return EOF_SYMBOL

    def is_eof(self) -> bool:
        return self.pos >= len(self.text)

    def has_next(self) -> bool:
        return not self.is_eof()

    def is_delimiter(self) -> bool:
        return self.is_eof() or self.peek().isspace() or self.peek() == ")"

    def consume(self) -> Optional[str]:
        if self.is_eof():
            return None
        c = self.text[self.pos]
        self.pos += 1
        return c

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.has_next() and predicate(self.peek()):
            self.pos += 1
        return self.text[start:self.pos]

    def skip_whitespace(self) -> None:
        self.consume_while(str.isspace)

    # --- tokens ---
    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.is_eof():
            return EOF

        c = self.peek()
        if _is_digit(c):
            return self._number()
        if c == "#":
            return self._hash_literal()
        if not self.structural:
            self._atom()
            return UNKNOWN
        if c in STRUCTURAL:
            self.consume()
            return STRUCTURAL[c]
        return self._atom()

    def _number(self) -> Token:
        digits = self.consume_while(_is_digit)
        if self.peek() == ".":
            return self._float(digits)
        if not self.is_delimiter():
            return UNKNOWN
        if len(digits.lstrip("0")) > INT64_DIGITS:
            return UNKNOWN
        value = int(digits)
        if value > INT64_MAX:
            return UNKNOWN
        return Token(TokenKind.INT, value)

    def _float(self, whole: str) -> Token:
        self.consume()  # '.'
        fraction = self.consume_while(_is_digit)
        if not self.is_delimiter():
            return UNKNOWN
        return Token(TokenKind.FLOAT, float(f"{whole}.{fraction}"))

    def _hash_literal(self) -> Token:
        self.consume()  # '#'
        match self.consume():
            case "t":
                return Token(TokenKind.BOOLEAN, True)
            case "f":
                return Token(TokenKind.BOOLEAN, False)
            case "\\":
                return self._char()
            case _:
                return UNKNOWN

    def _char(self) -> Token:
        c = self.consume()
        if c is None or not self.is_delimiter():
            return UNKNOWN
        return Token(TokenKind.CHAR, c)

    def _atom(self) -> Token:
        # always consumes at least one character
        name = self.consume() + self.consume_while(lambda ch: not ch.isspace() and ch != ")")
        return Token(TokenKind.ATOM, name)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return


def lex(source: str, structural: bool = True) -> list[Token]:
    """Tokenize `source` completely; the last token is always EOF."""
    return list(Cursor(source, structural))
