from __future__ import annotations
import logging
import os
from typing import Optional


# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = '> '


def value_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = value_from_env('EGG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = value_from_env('EGG_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


def get_prompt() -> str:
    # Not stripped: trailing spaces are part of a prompt
    raw = os.environ.get('EGG_PROMPT')
    return raw if raw else _DEFAULT_PROMPT
