from __future__ import annotations
import logging
import os
from typing import Optional

DEFAULT_PARSE_CACHE_SIZE = 128
DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_parse_cache_size() -> int:
    size = int_from_env('TINYLISP_PARSE_CACHE_SIZE', DEFAULT_PARSE_CACHE_SIZE)
    return max(size, 0)


def get_recursion_limit() -> Optional[int]:
    return int_from_env('TINYLISP_RECURSION_LIMIT', None)


def get_prompt() -> str:
    return os.environ.get('TINYLISP_PROMPT', DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('TINYLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Setup logging for the front-end. The library itself never calls this."""
    logging.basicConfig(
        level=getattr(logging, level or get_log_level(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
