from __future__ import annotations


class LispError(Exception):
    """ Base class for all tinylisp errors.

    line/column are best effort: the reader fills them in from the offending
    token, evaluation errors usually carry no position.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return f"Error: {self.message}"
        return f"Error at line {self.line}, column {self.column}: {self.message}"


class LispSyntaxError(LispError):
    """ Raised when source text cannot be read into an expression"""


class LispUnexpectedEOF(LispSyntaxError):
    """ Raised when the tokens run out before a list is closed"""


class LispUnexpectedCloseParen(LispSyntaxError):
    """ Raised when a ')' appears without a matching '('"""


class LispInvalidSymbol(LispError):
    """ Raised when a non-symbol is used as a binding name"""


class LispUnboundSymbol(LispError):
    """ Raised when a symbol is used before it is bound"""


class LispNotCallable(LispError):
    """ Raised when the head of a call form does not name a function"""


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class LispEmptyList(LispTypeError):
    """ Raised when car/cdr is applied to the empty list"""


class LispDivisionByZero(LispError):
    """ Raised when a divisor of / or % is zero"""


class LispInvalidLetBinding(LispError):
    """ Raised when a let binding is not a (name expr) pair"""


class LispInvalidFunctionDefinition(LispError):
    """ Raised when defun/lambda get a bad name or parameter list"""


class LispIntegerOverflow(LispTypeError):
    """ Raised when an integer result does not fit in 64 bits"""
