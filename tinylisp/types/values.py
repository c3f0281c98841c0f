"""Value predicates, numeric normalization and textual rendering.

Rendering follows the reader: `render` produces text that the lexer and
parser read back into an equal value (strings are quote-wrapped with `"` and
`\\` escaped). `display` is the human form used by print and format, where
strings appear raw.
"""

from __future__ import annotations

import math

import numpy as np

from tinylisp import LispValue
from tinylisp.types.errors import LispIntegerOverflow
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol


def is_number(value: LispValue) -> bool:
    # bool is a subclass of int in Python; booleans are not numbers here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def in_int_range(value: int | float) -> bool:
    return INT_MIN <= value <= INT_MAX


def check_integer(value: int) -> int:
    """Return `value` unchanged, or raise LispIntegerOverflow outside 64 bits."""
    if not in_int_range(value):
        raise LispIntegerOverflow("integer overflow: result does not fit in 64 bits")
    return value


def normalize_number(value: int | float) -> int | float:
    """Exact-value collapsing: a whole-valued float comes back as an int.

    Floats too large for a 64-bit integer stay floats; integer results are
    range checked.
    """
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and in_int_range(value):
            return int(value)
        return value
    return check_integer(value)


def format_float(value: float) -> str:
    """Shortest round-trippable positional decimal, always with a '.'."""
    if not math.isfinite(value):
        return str(value)
    return np.format_float_positional(value, unique=True, trim="0")


def _quote_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render(value: LispValue) -> str:
    """Textual form of a value, readable back by the parser."""
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return format_float(value)
        case str():
            return _quote_string(value)
        case Symbol():
            return value.id
        case list():
            return "(" + " ".join(render(v) for v in value) + ")"
        case Lambda():
            return str(value)
        case _ if value is Nil:
            return "nil"
        case _ if callable(value):
            return "BUILTIN"
    return str(value)


def display(value: LispValue) -> str:
    """Like render, but strings are shown without quotes."""
    if isinstance(value, str):
        return value
    return render(value)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, element-wise for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def type_name(value: LispValue) -> str:
    """Name of the value's variant, used in error messages."""
    match value:
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case Symbol():
            return "atom"
        case list():
            return "list"
        case Lambda():
            return "function"
        case _ if value is Nil:
            return "nil"
        case _ if callable(value):
            return "builtin"
    return type(value).__name__
