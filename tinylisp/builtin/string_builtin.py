"""String builtins: concat, substring, type predicates and format."""
from __future__ import annotations

import re

from tinylisp import LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispTypeError
from tinylisp.types.nil import Nil
from tinylisp.types.values import display, is_integer, is_number, render
from tinylisp.builtin.io_builtin import Console

DIRECTIVE_RE = re.compile(r"%(.?)")


def concat(env: Environment, args: list[LispValue]) -> str:
    for a in args:
        if not isinstance(a, str):
            raise LispTypeError(f"invalid argument to concat: {render(a)}")
    return "".join(args)


def substring(env: Environment, args: list[LispValue]) -> str:
    """(substring s start end) -> s[start:end], 0 <= start <= end <= len(s)."""
    if len(args) != 3:
        raise LispArityError("substring requires exactly 3 arguments")
    s, start, end = args
    if not isinstance(s, str):
        raise LispTypeError("first argument to substring must be a string")
    if not is_integer(start):
        raise LispTypeError("second argument to substring must be an integer")
    if not is_integer(end):
        raise LispTypeError("third argument to substring must be an integer")
    if start < 0 or end > len(s) or start > end:
        raise LispTypeError(f"invalid substring range [{start}, {end}) for length {len(s)}")
    return s[start:end]


def is_string(env: Environment, args: list[LispValue]) -> bool:
    if len(args) != 1:
        raise LispArityError("isString requires exactly 1 argument")
    return isinstance(args[0], str)


def is_number_builtin(env: Environment, args: list[LispValue]) -> bool:
    if len(args) != 1:
        raise LispArityError("isNumber requires exactly 1 argument")
    return is_number(args[0])


def _substitute(template: str, values: list[LispValue]) -> str:
    remaining = list(values)

    def directive(m: re.Match) -> str:
        verb = m.group(1)
        if verb == "%":
            return "%"
        if verb not in ("v", "s", "d", "f"):
            raise LispTypeError(f"unknown format directive %{verb}")
        if not remaining:
            raise LispArityError(f"not enough arguments for format template {render(template)}")
        value = remaining.pop(0)
        if verb == "d":
            if not is_integer(value):
                raise LispTypeError(f"%d expects an integer, got {render(value)}")
            return str(value)
        if verb == "f":
            if not is_number(value):
                raise LispTypeError(f"%f expects a number, got {render(value)}")
            return f"{value:f}"
        return display(value)

    text = DIRECTIVE_RE.sub(directive, template)
    if remaining:
        raise LispArityError(f"too many arguments for format template {render(template)}")
    return text


def format_builtin(console: Console, env: Environment, args: list[LispValue]) -> str:
    """Positional substitution into a format template.

    (format template arg...) or (format dest template arg...), where dest is
    a boolean or nil. Directives: %v and %s (display form), %d (integer),
    %f (number, six decimals), %% (a literal %). A true destination also
    writes the text to the console.
    """
    if not args:
        raise LispArityError("format requires a template")
    dest: LispValue = Nil
    if isinstance(args[0], bool) or args[0] is Nil:
        dest, args = args[0], args[1:]
    if not args or not isinstance(args[0], str):
        raise LispTypeError(f"invalid format string: {render(args[0]) if args else 'missing'}")
    text = _substitute(args[0], args[1:])
    if dest is True:
        console.write(text)
    return text
