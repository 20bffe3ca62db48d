"""Kernel security – event ownership predicate.

Events reach the engine through several creation paths, each stamping a
different identity representation (display name, email, numeric id,
embedded organizer object).  Ownership is therefore an OR over a declared
list of ``(event field, principal field)`` pairs: if any pair compares
equal the principal owns the event.  There is no precedence between pairs.
"""
from __future__ import annotations

import dataclasses
from typing import Callable, Iterable, Iterator

from eventgate.kernel.events import Event, OrganizerRef
from eventgate.kernel.identity import identity_text
from eventgate.kernel.security.principal import Principal


def organizer_id_of(event: Event) -> str | None:
    """First available organizer identity: the organizer object's id,
    ``organizer_id``, then a plain organizer string."""
    if isinstance(event.organizer, OrganizerRef):
        embedded = identity_text(event.organizer.id)
        if embedded is not None:
            return embedded
    declared = identity_text(event.organizer_id)
    if declared is not None:
        return declared
    if isinstance(event.organizer, str):
        return identity_text(event.organizer)
    return None


_EVENT_FIELDS: dict[str, Callable[[Event], object]] = {
    "created_by": lambda event: event.created_by,
    "organizer_id": organizer_id_of,
}

_PRINCIPAL_FIELDS: dict[str, Callable[[Principal], object]] = {
    "id": lambda principal: principal.id,
    "email": lambda principal: principal.email,
    "name": lambda principal: principal.name,
    "full_name": lambda principal: principal.full_name,
}


@dataclasses.dataclass(frozen=True)
class OwnershipKey:
    """One ownership comparison: ``event.<event_field> == principal.<principal_field>``."""

    event_field: str
    principal_field: str

    def __post_init__(self) -> None:
        if self.event_field not in _EVENT_FIELDS:
            raise ValueError(f"unknown event field {self.event_field!r}")
        if self.principal_field not in _PRINCIPAL_FIELDS:
            raise ValueError(f"unknown principal field {self.principal_field!r}")

    def matches(self, principal: Principal, event: Event) -> bool:
        left = identity_text(_EVENT_FIELDS[self.event_field](event))
        right = identity_text(_PRINCIPAL_FIELDS[self.principal_field](principal))
        return left is not None and left == right


OWNERSHIP_KEYS: tuple[OwnershipKey, ...] = (
    OwnershipKey("created_by", "full_name"),
    OwnershipKey("created_by", "name"),
    OwnershipKey("created_by", "id"),
    OwnershipKey("created_by", "email"),
    OwnershipKey("organizer_id", "id"),
)


def matching_keys(
    principal: Principal | None,
    event: Event | None,
    keys: Iterable[OwnershipKey] = OWNERSHIP_KEYS,
) -> tuple[OwnershipKey, ...]:
    """Every key under which *principal* owns *event* (for diagnostics)."""
    if principal is None or event is None:
        return ()
    return tuple(key for key in keys if key.matches(principal, event))


def is_owner(
    principal: Principal | None,
    event: Event | None,
    keys: Iterable[OwnershipKey] = OWNERSHIP_KEYS,
) -> bool:
    """``True`` if any ownership key matches."""
    if principal is None or event is None:
        return False
    return any(key.matches(principal, event) for key in keys)


def owned_events(principal: Principal | None, events: Iterable[Event]) -> Iterator[Event]:
    """Yield the events *principal* owns, preserving order."""
    for event in events:
        if is_owner(principal, event):
            yield event


__all__ = [
    "OWNERSHIP_KEYS",
    "OwnershipKey",
    "is_owner",
    "matching_keys",
    "organizer_id_of",
    "owned_events",
]
