"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
STORE_ROOT, STORE_BACKEND, MAX_FILE_CHARS, LOG_LEVEL).
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# Parent directory for the rooted store (kept as given, resolved by the OS)
STORE_ROOT = _env_str("STORE_ROOT", ".")

# "rooted" or "memory"
STORE_BACKEND = _env_str("STORE_BACKEND", "rooted").lower()

# Limits / output
MAX_FILE_CHARS = _env_int("MAX_FILE_CHARS", 200_000)

# Logging goes to stderr; stdout carries the MCP stdio protocol
LOG_LEVEL = _env_str("LOG_LEVEL", "WARNING").upper()
