"""Text utility helpers."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(value: str) -> str:
    """Collapse repeated whitespace and trim ends."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def split_list(value: str) -> list[str]:
    """Split a comma-separated value into trimmed, non-empty items."""
    return [item for item in (normalize_whitespace(part) for part in value.split(",")) if item]
