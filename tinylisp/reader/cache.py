"""Memoization of `read_program` keyed by source text.

Parsing is referentially transparent and parsed trees are never mutated, so a
cached tree can be handed to every caller. The cache is guarded by a lock so
several interpreters may share one instance.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from tinylisp import SExpression
from tinylisp.reader.parser import read_program

logger = logging.getLogger(__name__)


class ParseCache:
    """Bounded LRU cache of parsed programs. maxsize 0 disables caching."""

    def __init__(self, maxsize: int = 128):
        self.maxsize = maxsize
        self._entries: OrderedDict[str, list[SExpression]] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def read(self, source: str) -> list[SExpression]:
        if self.maxsize <= 0:
            return read_program(source)

        with self._lock:
            program = self._entries.get(source)
            if program is not None:
                self._entries.move_to_end(source)
                self.hits += 1
                logger.debug("parse cache hit (%d chars)", len(source))
                return program

        # Parse outside the lock; errors propagate and are never cached
        program = read_program(source)

        with self._lock:
            self.misses += 1
            self._entries[source] = program
            self._entries.move_to_end(source)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
        logger.debug("parse cache miss (%d chars)", len(source))
        return program

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
