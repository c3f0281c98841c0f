"""
  Lisp Parser

Recursive descent over the lexer's tokens. Emits Python primitives rather
than cons cells:

    - ( ... )      -> Python list
    - identifiers  -> Symbol
    - strings      -> str
    - numbers      -> int / float
    - true / false -> bool
    - nil          -> Nil

A whole program parses to a single list holding its top-level expressions;
the caller evaluates those elements one by one.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tinylisp import SExpression
from tinylisp.reader.lexer import Token, TokenKind, tokenize
from tinylisp.types.errors import LispSyntaxError, LispUnexpectedCloseParen, LispUnexpectedEOF
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import in_int_range


def _integer(token: Token) -> int:
    # more than 19 significant digits never fits, and int() would refuse very long strings
    digits = token.text.lstrip("+-").lstrip("0")
    if len(digits) > 19 or not in_int_range(int(token.text)):
        raise LispSyntaxError(f"integer literal out of range: {token.text}", token.line, token.column)
    return int(token.text)


def _literal(token: Token) -> SExpression:
    match token.kind:
        case TokenKind.NUMBER:
            return _integer(token)
        case TokenKind.FLOAT:
            return float(token.text)
        case TokenKind.STRING:
            return token.text
        case TokenKind.BOOLEAN:
            return token.text == "true"
        case TokenKind.NIL:
            return Nil
    return Symbol(token.text)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []
        self.last: Optional[Token] = None

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            token = self.buffer.pop(0)
        else:
            token = next(self.tokens, None)
        if token is not None:
            self.last = token
        return token

    def remaining(self) -> list[Token]:
        rest = self.buffer + list(self.tokens)
        self.buffer = []
        self.tokens = iter(())
        return rest

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            line, column = (self.last.line, self.last.column) if self.last else (None, None)
            raise LispUnexpectedEOF("unexpected EOF while reading", line, column)

        if token.kind is TokenKind.CLOSE_PAREN:
            raise LispUnexpectedCloseParen("unexpected )", token.line, token.column)

        if token.kind is TokenKind.OPEN_PAREN:
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispUnexpectedEOF(
                        "unexpected EOF while reading: unclosed (", token.line, token.column
                    )
                if nxt.kind is TokenKind.CLOSE_PAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        return _literal(token)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> tuple[SExpression, list[Token]]:
    """Parse one expression; return it together with the unconsumed tokens."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def parse_program(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse every top-level expression into a single list."""
    return list(TokenStream(tokens).parse_all())


def read_program(source: str) -> list[SExpression]:
    return parse_program(tokenize(source))
