from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from tinylisp import LispValue
from tinylisp.config import get_parse_cache_size
from tinylisp.reader.cache import ParseCache
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispError
from tinylisp.types.values import render
from tinylisp.builtin.env_builtin import make_global_environment
from tinylisp.builtin.io_builtin import Console
from tinylisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating tinylisp code.
    Owns the global Environment, which persists across calls so definitions
    made by one chunk of source are visible to the next.
    """

    def __init__(
        self,
        console: Console | None = None,
        cache: ParseCache | None = None,
    ):
        self.env: Environment = make_global_environment(console)
        self.cache: ParseCache = cache if cache is not None else ParseCache(get_parse_cache_size())

    def read(self, code: str) -> list:
        """Parse `code` into its top-level expressions."""
        return self.cache.read(code)

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression in order and return all results.

        The first LispError aborts the call.
        """
        results: list[LispValue] = []
        for expr in self.read(code):
            logger.debug("evaluating %s", render(expr))
            results.append(evaluate(expr, self.env))
        return results

    def eval_each(self, code: str) -> Iterator[LispValue | LispError]:
        """REPL-style evaluation.

        Yields each top-level result; an expression that fails yields its
        LispError and evaluation continues with the next one. A parse error
        aborts the whole chunk.
        """
        for expr in self.read(code):
            try:
                yield evaluate(expr, self.env)
            except LispError as ex:
                logger.debug("top-level expression failed: %s", ex)
                yield ex

    def eval_file(self, path: str | Path) -> list[LispValue]:
        return self.eval(Path(path).read_text(encoding="utf-8"))
