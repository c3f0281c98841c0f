"""Built-in functions for the tinylisp runtime environment.

This module defines core arithmetic, comparison and list processing builtins,
and the registration helpers that build the global environment. Every builtin
takes the calling environment and its already-evaluated arguments.
"""
from __future__ import annotations

import math
import operator
from functools import partial
from typing import Callable

from tinylisp import LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import (
    LispArityError,
    LispDivisionByZero,
    LispEmptyList,
    LispIntegerOverflow,
    LispTypeError,
)
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import check_integer, is_equal, is_integer, is_number, normalize_number, render
from tinylisp.builtin import io_builtin, string_builtin
from tinylisp.builtin.io_builtin import Console, StdConsole


def _numbers(name: str, expr: list[LispValue]) -> list[int | float]:
    for x in expr:
        if not is_number(x):
            raise LispTypeError(f"invalid argument to {name}: {render(x)}")
    return expr


def _promote(expr: list[int | float]) -> list[int | float]:
    """Any float operand turns the whole computation into float arithmetic."""
    if any(isinstance(x, float) for x in expr):
        return [float(x) for x in expr]
    return expr


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    return normalize_number(sum(_promote(_numbers("+", expr))))


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise LispArityError("- requires at least 1 argument")
    nums = _promote(_numbers("-", expr))
    if len(nums) == 1:
        return normalize_number(-nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return normalize_number(result)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; errors if any arg is non-numeric."""
    return normalize_number(math.prod(_promote(_numbers("*", expr))))


def _divide(a: int | float, b: int | float) -> int | float:
    if b == 0:
        raise LispDivisionByZero("division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal.

    Integer operands that divide exactly stay exact.
    """
    if not expr:
        raise LispArityError("/ requires at least 1 argument")
    nums = _promote(_numbers("/", expr))
    if len(nums) == 1:
        return normalize_number(_divide(1, nums[0]))
    result = nums[0]
    for x in nums[1:]:
        result = _divide(result, x)
    return normalize_number(result)


def mod(env: Environment, expr: list[LispValue]) -> LispValue:
    """(% n d): remainder with the sign of the dividend."""
    if len(expr) != 2:
        raise LispArityError("% requires exactly 2 arguments")
    n, d = _promote(_numbers("%", expr))
    if d == 0:
        raise LispDivisionByZero("division by zero")
    if isinstance(n, int):
        r = abs(n) % abs(d)
        return normalize_number(r if n >= 0 else -r)
    return normalize_number(math.fmod(n, d))


def power(env: Environment, expr: list[LispValue]) -> LispValue:
    """(pow base exponent)"""
    if len(expr) != 2:
        raise LispArityError("pow requires exactly 2 arguments")
    base, exponent = _numbers("pow", expr)
    if is_integer(base) and is_integer(exponent) and exponent >= 0:
        # any |base| >= 2 leaves the 64-bit range well before exponent 64
        if abs(base) > 1 and exponent >= 64:
            raise LispIntegerOverflow("integer overflow: result does not fit in 64 bits")
        return check_integer(base ** exponent)
    try:
        return normalize_number(math.pow(base, exponent))
    except ValueError:
        raise LispTypeError(f"pow of {render(base)} to {render(exponent)} is not a real number")
    except OverflowError:
        raise LispTypeError("pow result is too large")


def sqrt(env: Environment, expr: list[LispValue]) -> LispValue:
    """(sqrt x) for non-negative x."""
    if len(expr) != 1:
        raise LispArityError("sqrt requires exactly 1 argument")
    (x,) = _numbers("sqrt", expr)
    if x < 0:
        raise LispTypeError("cannot take square root of negative number")
    return normalize_number(math.sqrt(x))


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable[[LispValue, LispValue], bool], expr: list[LispValue]) -> bool:
    """Chainable comparison: true if op holds for all adjacent pairs."""
    if len(expr) < 2:
        raise LispArityError(f"{name} requires at least 2 arguments")
    nums = _numbers(name, expr)
    return all(op(a, b) for a, b in zip(nums, nums[1:]))


def lt(env: Environment, expr: list[LispValue]) -> bool:
    return _chain("<", operator.lt, expr)


def lte(env: Environment, expr: list[LispValue]) -> bool:
    return _chain("<=", operator.le, expr)


def gt(env: Environment, expr: list[LispValue]) -> bool:
    return _chain(">", operator.gt, expr)


def gte(env: Environment, expr: list[LispValue]) -> bool:
    return _chain(">=", operator.ge, expr)


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """Numeric equality for numbers, structural equality for anything else."""
    if len(expr) < 2:
        raise LispArityError("= requires at least 2 arguments")
    return all(is_equal(a, b) for a, b in zip(expr, expr[1:]))


# -------------------------------
# List operations
# -------------------------------
def _as_list(name: str, value: LispValue) -> list[LispValue]:
    """Nil is accepted as the empty list."""
    if value is Nil:
        return []
    if not isinstance(value, list):
        raise LispTypeError(f"invalid argument to {name}: {render(value)}")
    return value


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    if len(expr) != 1:
        raise LispArityError("car requires exactly 1 argument")
    xs = _as_list("car", expr[0])
    if not xs:
        raise LispEmptyList("car of empty list")
    return xs[0]


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return all but the first element of a non-empty list."""
    if len(expr) != 1:
        raise LispArityError("cdr requires exactly 1 argument")
    xs = _as_list("cdr", expr[0])
    if not xs:
        raise LispEmptyList("cdr of empty list")
    return xs[1:]


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list with head prepended to tail (non-destructive)."""
    if len(expr) != 2:
        raise LispArityError("cons requires exactly 2 arguments")
    head, tail = expr
    return [head, *_as_list("cons", tail)]


def length(env: Environment, expr: list[LispValue]) -> int:
    """Length of a list or a string."""
    if len(expr) != 1:
        raise LispArityError("length requires exactly 1 argument")
    (x,) = expr
    if isinstance(x, str):
        return len(x)
    return len(_as_list("length", x))


def append(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new one."""
    result: list[LispValue] = []
    for item in expr:
        result.extend(_as_list("append", item))
    return result


# -------------------------------
# Registration
# -------------------------------
CONSTANTS = {
    Symbol("true"): True,
    Symbol("t"): True,
    Symbol("false"): False,
    Symbol("nil"): Nil,
}


def register(env: Environment, console: Console | None = None) -> None:
    """Register all builtin functions and constants into the given environment."""
    console = console or StdConsole()
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("%"): mod,
            Symbol("pow"): power,
            Symbol("sqrt"): sqrt,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("="): equals,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("cons"): cons,
            Symbol("length"): length,
            Symbol("append"): append,
            Symbol("concat"): string_builtin.concat,
            Symbol("substring"): string_builtin.substring,
            Symbol("isString"): string_builtin.is_string,
            Symbol("isNumber"): string_builtin.is_number_builtin,
            Symbol("format"): partial(string_builtin.format_builtin, console),
            Symbol("print"): partial(io_builtin.print_builtin, console),
            Symbol("read"): partial(io_builtin.read_builtin, console),
        }
    )
    env.update(CONSTANTS)


def make_global_environment(console: Console | None = None) -> Environment:
    """Create the root environment: constants plus every builtin."""
    env = Environment()
    register(env, console)
    return env
