"""Shared helpers for the built-in rules."""
from __future__ import annotations

# Straight and curly quote characters stripped from headers before matching.
QUOTE_CHARS = "'\"‘’“”"

_QUOTE_TABLE = str.maketrans("", "", QUOTE_CHARS)


def strip_quotes(text: str) -> str:
    """Remove every straight or curly quote character from text."""
    return text.translate(_QUOTE_TABLE)


def header_of(message: str) -> str:
    """Return the first line of a message (empty string for empty input)."""
    return message.split("\n", 1)[0]


def max_length_option(options: dict | None, default: int) -> int:
    """Read the ``maxLength`` option, falling back to default when unset, zero or invalid."""
    value = (options or {}).get("maxLength")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value
