"""
Environment value helpers.
"""

from __future__ import annotations

import os


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    # Some env providers leak literal escaped control chars.
    return value.replace("\\n", "").replace("\\r", "").strip()


def env_str(name: str, fallback: str = "") -> str:
    value = sanitize_env_value(os.getenv(name), fallback)
    return value or fallback


def env_int(name: str, fallback: int) -> int:
    raw = sanitize_env_value(os.getenv(name))
    try:
        return int(raw)
    except ValueError:
        return fallback


def env_list(name: str, separator: str = ",") -> list[str]:
    raw = sanitize_env_value(os.getenv(name))
    return [item.strip() for item in raw.split(separator) if item.strip()]
