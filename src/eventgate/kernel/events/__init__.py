"""Kernel events – the event model consumed by the gating engine."""
from eventgate.kernel.events.model import (
    ApprovalStatus,
    Event,
    EventStatus,
    Invitation,
    InvitationStatus,
    OrganizerRef,
    Visibility,
    event_from_payload,
    invitations_from_payload,
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
