"""Utilities to normalize free-text labels coming from data sources."""

from __future__ import annotations

from typing import Optional


def normalize_label(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace from a name or activity label.

    Interior text is kept verbatim. Returns ``None`` for blank labels.
    """
    if value is None:
        return None
    return value.strip() or None
