"""Kernel time – Clock protocol used to stamp and progress events."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock pinned to *fixed*; moved forward only through :meth:`advance`."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> datetime:
        self._fixed += timedelta(**kwargs)
        return self._fixed


__all__ = ["Clock", "FrozenClock", "SystemClock"]
