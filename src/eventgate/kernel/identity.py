"""Kernel identity – normalisation of identity values from REST payloads.

Users and events reference people by id, email or display name, and ids
arrive as either numbers or strings.  Everything is compared as stripped
text; blank values are absent.
"""
from __future__ import annotations

from typing import Any


def identity_text(value: Any) -> str | None:
    """Normalise an identity-ish scalar to a stripped string, or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        text = str(value).strip()
        return text or None
    return None


__all__ = ["identity_text"]
