"""Kernel events – Event, Invitation and their status enumerations."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from eventgate.kernel.identity import identity_text

E = TypeVar("E", bound=Enum)


class Visibility(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class ApprovalStatus(str, Enum):
    """Moderation axis.  PENDING is initial; APPROVED and REJECTED are terminal."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class EventStatus(str, Enum):
    """Operational axis, independent of approval."""

    UPCOMING = "UPCOMING"
    ACTIVE = "ACTIVE"
    HOLD = "HOLD"
    INACTIVE = "INACTIVE"
    COMPLETED = "COMPLETED"


class InvitationStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


@dataclasses.dataclass(frozen=True)
class Invitation:
    """An attendee entry on an event."""

    email: str | None
    invitation_status: InvitationStatus | None = InvitationStatus.PENDING


@dataclasses.dataclass(frozen=True)
class OrganizerRef:
    """Organizer given as an embedded user object rather than a string."""

    id: str | None = None
    name: str | None = None
    email: str | None = None


@dataclasses.dataclass(frozen=True)
class Event:
    """Read-only view of an event as handed over by the REST client.

    ``created_by``, ``organizer`` and ``organizer_id`` are all ownership
    references; which of them is populated depends on how the event was
    created, so none of them is treated as canonical.
    """

    id: str | None = None
    title: str | None = None
    visibility: Visibility | None = None
    approval_status: ApprovalStatus | None = None
    event_status: EventStatus | None = None
    created_by: str | None = None
    organizer: str | OrganizerRef | None = None
    organizer_id: str | None = None
    attendees: tuple[Invitation, ...] = ()
    start_time: datetime | None = None
    end_time: datetime | None = None
    remarks: str | None = None
    approved_by: str | None = None
    approved_at: datetime | None = None
    pre_hold_status: EventStatus | None = None

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------


def _enum(enum_cls: type[E], raw: Any) -> E | None:
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return enum_cls(raw.strip().upper())
    except ValueError:
        return None


def _datetime(raw: Any) -> datetime | None:
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return datetime.fromisoformat(raw.strip())
    except ValueError:
        return None


def _first(payload: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _organizer(raw: Any) -> str | OrganizerRef | None:
    if isinstance(raw, dict):
        return OrganizerRef(
            id=identity_text(raw.get("id")),
            name=identity_text(_first(raw, "fullName", "name")),
            email=identity_text(raw.get("email")),
        )
    return identity_text(raw)


def invitations_from_payload(raw: Any) -> tuple[Invitation, ...]:
    """Parse an attendee list; entries without an email are dropped."""
    if not isinstance(raw, (list, tuple)):
        return ()
    invitations: list[Invitation] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        email = identity_text(entry.get("email"))
        if email is None:
            continue
        status = _first(entry, "invitationStatus", "invitation_status", "status")
        invitations.append(
            Invitation(
                email=email,
                invitation_status=_enum(InvitationStatus, status) if status is not None
                else InvitationStatus.PENDING,
            )
        )
    return tuple(invitations)


def event_from_payload(payload: dict[str, Any] | None) -> Event | None:
    """Parse a REST event object.  Unknown enum values become ``None``."""
    if not isinstance(payload, dict):
        return None
    return Event(
        id=identity_text(payload.get("id")),
        title=identity_text(_first(payload, "title", "name")),
        visibility=_enum(Visibility, payload.get("visibility")),
        approval_status=_enum(
            ApprovalStatus, _first(payload, "approvalStatus", "approval_status")
        ),
        event_status=_enum(
            EventStatus, _first(payload, "eventStatus", "event_status", "status")
        ),
        created_by=identity_text(_first(payload, "createdBy", "created_by")),
        organizer=_organizer(payload.get("organizer")),
        organizer_id=identity_text(_first(payload, "organizerId", "organizer_id")),
        attendees=invitations_from_payload(payload.get("attendees")),
        start_time=_datetime(_first(payload, "startTime", "start_time", "date")),
        end_time=_datetime(_first(payload, "endTime", "end_time")),
        remarks=payload["remarks"] if isinstance(payload.get("remarks"), str) else None,
        approved_by=identity_text(_first(payload, "approvedByName", "approvedById", "approved_by")),
        approved_at=_datetime(_first(payload, "approvedAt", "approved_at")),
        pre_hold_status=_enum(
            EventStatus, _first(payload, "preHoldStatus", "pre_hold_status")
        ),
    )


__all__ = [
    "ApprovalStatus",
    "Event",
    "EventStatus",
    "Invitation",
    "InvitationStatus",
    "OrganizerRef",
    "Visibility",
    "event_from_payload",
    "invitations_from_payload",
]
