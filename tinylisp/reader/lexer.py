"""
  Lisp Lexer

- Streaming, lazy tokenization: `lex` is a generator over the source text.
- Never fails: malformed input degrades to IDENTIFIER tokens.
- Every token records the 1-based line and column of its first character.

Token classification of a flushed lexeme:

    true / false   -> BOOLEAN
    nil            -> NIL
    -12, 42, +7    -> NUMBER
    3.14, -.5, 1.e3 -> FLOAT   (a '.' is required)
    anything else  -> IDENTIFIER
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterator

OPEN_PAREN = "("
CLOSE_PAREN = ")"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"

NUMBER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?")


class TokenKind(enum.Enum):
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    NIL = "NIL"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"


def classify(lexeme: str) -> TokenKind:
    """Classify a flushed (non-string, non-bracket) lexeme."""
    if lexeme in ("true", "false"):
        return TokenKind.BOOLEAN
    if lexeme == "nil":
        return TokenKind.NIL
    if NUMBER_RE.fullmatch(lexeme):
        return TokenKind.NUMBER
    if FLOAT_RE.fullmatch(lexeme):
        return TokenKind.FLOAT
    return TokenKind.IDENTIFIER


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token objects in source order."""
    line, column = 1, 1
    pending: list[str] = []
    start = (1, 1)  # position of the first char of the pending lexeme
    in_string = False
    escape_next = False

    def flush() -> Iterator[Token]:
        if pending:
            lexeme = "".join(pending)
            pending.clear()
            yield Token(classify(lexeme), lexeme, *start)

    for char in source:
        if in_string:
            if escape_next:
                pending.append(char)
                escape_next = False
            elif char == BACKSLASH:
                escape_next = True
            elif char == DOUBLE_QUOTE:
                in_string = False
                yield Token(TokenKind.STRING, "".join(pending), *start)
                pending.clear()
            else:
                pending.append(char)
        elif char.isspace():
            yield from flush()
        elif char in (OPEN_PAREN, CLOSE_PAREN):
            yield from flush()
            yield Token(TokenKind(char), char, line, column)
        elif char == DOUBLE_QUOTE:
            yield from flush()
            in_string = True
            start = (line, column)
        else:
            if not pending:
                start = (line, column)
            pending.append(char)

        if char == "\n":
            line += 1
            column = 1
        else:
            column += 1

    if in_string:
        # Unterminated string: degrade to an identifier holding the raw text
        text = DOUBLE_QUOTE + "".join(pending)
        if escape_next:
            text += BACKSLASH
        yield Token(TokenKind.IDENTIFIER, text, *start)
    else:
        yield from flush()


def tokenize(source: str) -> list[Token]:
    """Materialize `lex` into a list."""
    return list(lex(source))
