"""Splitting strings on a single-character delimiter and formatting sequences."""

from __future__ import annotations

from collections.abc import Iterable


def string_split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``.

    An empty string gives no parts, and a trailing delimiter does not produce
    an empty last part.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    parts = text.split(delimiter)
    if text.endswith(delimiter):
        parts.pop()
    return parts


def format_sequence(items: Iterable[object]) -> str:
    """Render items as ``{a, b, c}``."""
    return "{" + ", ".join(str(item) for item in items) + "}"