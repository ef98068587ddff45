from __future__ import annotations
import os
from typing import Optional


_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_recursion_limit() -> Optional[int]:
    return int_from_env('TINYLISP_RECURSION_LIMIT')


def get_prompt() -> str:
    return os.environ.get('TINYLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('TINYLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
