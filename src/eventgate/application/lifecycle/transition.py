"""Lifecycle transition results."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from eventgate.application.lifecycle.rules import Action
from eventgate.kernel.errors import DomainError
from eventgate.kernel.events import Event


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of one lifecycle transition.

    On success ``event`` is the new value; on refusal it is the unchanged
    input and ``error`` says why.  Truthiness follows ``allowed``.
    """

    action: Action
    allowed: bool
    event: Event
    previous: Event
    error: DomainError | None = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __bool__(self) -> bool:
        return self.allowed

    @property
    def reason(self) -> str | None:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> Event:
        """Return the new event, or raise the refusal error."""
        if self.error is not None:
            raise self.error
        return self.event


__all__ = ["TransitionResult"]
