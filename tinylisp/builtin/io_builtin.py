"""The console collaborator and the builtins that talk to it.

The interpreter core never touches stdin/stdout directly: `read` and `print`
go through a Console, so a front-end (or a test) decides where text comes
from and where it goes.
"""
from __future__ import annotations

import sys
from typing import Protocol, TextIO

from tinylisp import LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil
from tinylisp.types.values import display


class Console(Protocol):
    def read_line(self, prompt: str = "") -> str | None:
        """Block until a line is available; None at end of input."""
        ...

    def write(self, text: str) -> None:
        ...


class StdConsole:
    """Console backed by the process's standard streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin
        self.stdout = stdout

    def read_line(self, prompt: str = "") -> str | None:
        out = self.stdout or sys.stdout
        if prompt:
            out.write(prompt)
            out.flush()
        line = (self.stdin or sys.stdin).readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        (self.stdout or sys.stdout).write(text)


def print_builtin(console: Console, env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated display forms of args followed by newline.

    Returns the last argument, or nil when called with none.
    """
    console.write(" ".join(display(a) for a in args) + "\n")
    return args[-1] if args else Nil


def read_builtin(console: Console, env: Environment, args: list[LispValue]) -> LispValue:
    """(read prompt...) -> the next line of input as a string, nil at end of input."""
    prompt = "".join(display(a) for a in args)
    line = console.read_line(prompt)
    return Nil if line is None else line
