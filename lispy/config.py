from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    return int_from_env('LISPY_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level(override: str | None = None) -> int:
    name = (override or os.environ.get('LISPY_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"LISPY_LOG_LEVEL is not a logging level: {name!r}")
    return level


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('LISPY_REPL_HOST', '').strip() or _DEFAULT_REPL_HOST
    return host, int_from_env('LISPY_REPL_PORT', _DEFAULT_REPL_PORT)
