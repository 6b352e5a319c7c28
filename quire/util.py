"""Miscellaneous helper utilities for Quire."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dictionary with override merged into base."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def env_first(*keys: str, default: str | None = None) -> str | None:
    """Return the first non-empty environment variable among keys."""
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return default


def tildify(path: str | os.PathLike[str]) -> str:
    """Render ``path`` with the home directory collapsed to ``~``."""
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    if text.startswith(home.rstrip(os.sep) + os.sep):
        return "~" + text[len(home.rstrip(os.sep)):]
    return text
