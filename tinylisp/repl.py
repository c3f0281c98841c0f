"""Front-end for the tinylisp interpreter: run a file or an interactive shell.

Both modes only hand source text to an Interpreter and print what comes back,
either rendered values or the error that stopped an expression.
"""
from __future__ import annotations

import argparse
import cmd
import logging
import sys
from typing import Optional, Sequence, TextIO

from tinylisp.config import get_prompt, get_recursion_limit, setup_logging
from tinylisp.interpreter import Interpreter
from tinylisp.reader.lexer import TokenKind, tokenize
from tinylisp.types.errors import LispError
from tinylisp.types.values import render

logger = logging.getLogger(__name__)


def paren_depth(source: str) -> int:
    """Open-paren nesting left unclosed at the end of `source`."""
    depth = 0
    for token in tokenize(source):
        if token.kind is TokenKind.OPEN_PAREN:
            depth += 1
        elif token.kind is TokenKind.CLOSE_PAREN:
            depth -= 1
    return depth


class Shell(cmd.Cmd):
    """Interactive tinylisp shell."""
    intro = "tinylisp interpreter\nType 'exit' or press Ctrl-D to leave."
    secondary_prompt = ". "  # used for line continuations

    def __init__(self, interp: Interpreter, prompt: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.interp = interp
        self.prompt = self._main_prompt = prompt if prompt is not None else get_prompt()
        self._pending = ""

    def onecmd(self, line):
        # Only "exit" and EOF are shell commands. Every other line is source,
        # so cmd's own "help" and "?" handling never sees it.
        # Inside an unfinished expression even "exit" is source.
        if line == "EOF" or (not self._pending and line.strip() == "exit"):
            return super().onecmd(line)
        if not self._pending and not line.strip():
            return self.emptyline()
        self.default(line)
        return False

    def default(self, line):
        """Evaluates tinylisp source, buffering until parentheses balance."""
        source = f"{self._pending}\n{line}" if self._pending else line
        if paren_depth(source) > 0:
            self._pending = source
            self.prompt = self.secondary_prompt
            return
        self._pending = ""
        self.prompt = self._main_prompt
        try:
            for result in self.interp.eval_each(source):
                if isinstance(result, LispError):
                    logger.warning("%s", result)
                    self.stdout.write(f"{result}\n")
                else:
                    self.stdout.write(f"{render(result)}\n")
        except LispError as ex:
            # parse errors abandon the whole chunk
            logger.warning("%s", ex)
            self.stdout.write(f"{ex}\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def run_file(interp: Interpreter, path: str, out: TextIO) -> int:
    """Evaluate a file, printing each result; returns a process exit status."""
    try:
        for result in interp.eval_file(path):
            out.write(f"{render(result)}\n")
    except LispError as ex:
        out.write(f"{ex}\n")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tinylisp")
    parser.add_argument("file", help="file to interpret and run (if empty, starts the interactive shell)", nargs="?")
    args = parser.parse_args(argv)

    setup_logging()
    limit = get_recursion_limit()
    if limit:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.file is not None:
        return run_file(interp, args.file, sys.stdout)
    Shell(interp).cmdloop()
    return 0
