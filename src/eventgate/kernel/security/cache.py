"""Kernel security – PermissionCache.

Process-scoped store of resolved permission sets.  The session that owns it
decides when it is cleared; business logic only receives the handle.
"""
from __future__ import annotations

import dataclasses
from typing import Hashable, TypeAlias

from eventgate.observability.logging import get_logger

_log = get_logger(__name__)

CacheKey: TypeAlias = tuple[Hashable, ...]


@dataclasses.dataclass
class CacheStats:
    """Counters observed by tests and diagnostics."""

    hits: int = 0
    misses: int = 0
    populations: int = 0
    clears: int = 0


class PermissionCache:
    """Write-once-per-key mapping of cache keys to permission sets."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, frozenset[str]] = {}
        self.stats = CacheStats()

    def get(self, key: CacheKey) -> frozenset[str] | None:
        """Return the cached set for *key*, or ``None`` on a miss."""
        entry = self._entries.get(key)
        if entry is None:
            self.stats.misses += 1
        else:
            self.stats.hits += 1
        return entry

    def populate(self, key: CacheKey, permissions: frozenset[str]) -> frozenset[str]:
        """Store *permissions* under *key* unless already present.

        Returns the value held by the cache afterwards, which is the first
        value ever populated for *key*.
        """
        existing = self._entries.get(key)
        if existing is not None:
            return existing
        self._entries[key] = permissions
        self.stats.populations += 1
        return permissions

    def clear(self) -> None:
        """Drop every entry.  Safe to call repeatedly."""
        if self._entries:
            _log.debug("permissions.cache_cleared", entries=len(self._entries))
        self._entries.clear()
        self.stats.clears += 1

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


__all__ = ["CacheKey", "CacheStats", "PermissionCache"]
