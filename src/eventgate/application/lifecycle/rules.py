"""Lifecycle action rules – the single table of status conditions.

Each action an event can offer is guarded by one specification over the
event's two status axes.  The gate computer and the lifecycle machine both
read this table; neither restates a condition.

The conditions keep the exact boolean structure they were defined with,
including the overlap between ``EDIT`` and ``DELETE``.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from eventgate.kernel.ddd import Specification
from eventgate.kernel.events import ApprovalStatus, Event, EventStatus


class Action(str, Enum):
    EDIT = "edit"
    DELETE = "delete"
    APPROVE = "approve"
    REJECT = "reject"
    HOLD = "hold"
    REACTIVATE = "reactivate"
    INVITE = "invite"


def _render(values: frozenset[Enum]) -> str:
    return "{" + ", ".join(sorted(v.value for v in values)) + "}"


class ApprovalIn(Specification[Event]):
    """Approval status is one of *statuses*."""

    def __init__(self, *statuses: ApprovalStatus) -> None:
        self.statuses = frozenset(statuses)

    def is_satisfied_by(self, candidate: Event) -> bool:
        return candidate.approval_status in self.statuses

    def describe(self) -> str:
        return f"approval in {_render(self.statuses)}"


class StatusIn(Specification[Event]):
    """Operational status is one of *statuses*."""

    def __init__(self, *statuses: EventStatus) -> None:
        self.statuses = frozenset(statuses)

    def is_satisfied_by(self, candidate: Event) -> bool:
        return candidate.event_status in self.statuses

    def describe(self) -> str:
        return f"status in {_render(self.statuses)}"


class StatusKnownNotIn(Specification[Event]):
    """Operational status is known and none of *statuses*.

    Unlike ``~StatusIn(...)`` this is false for an event whose status is
    missing or unrecognised.
    """

    def __init__(self, *statuses: EventStatus) -> None:
        self.statuses = frozenset(statuses)

    def is_satisfied_by(self, candidate: Event) -> bool:
        return candidate.event_status is not None and candidate.event_status not in self.statuses

    def describe(self) -> str:
        return f"status known and not in {_render(self.statuses)}"


A, S = ApprovalStatus, EventStatus

ACTION_RULES: Mapping[Action, Specification[Event]] = MappingProxyType(
    {
        Action.EDIT: ApprovalIn(A.PENDING, A.APPROVED) | StatusIn(S.INACTIVE, S.UPCOMING),
        Action.DELETE: (
            ApprovalIn(A.PENDING, A.REJECTED, A.APPROVED)
            | StatusIn(S.INACTIVE, S.UPCOMING, S.HOLD)
        ),
        Action.APPROVE: ApprovalIn(A.PENDING),
        Action.REJECT: ApprovalIn(A.PENDING),
        Action.HOLD: ApprovalIn(A.APPROVED) & StatusKnownNotIn(S.INACTIVE, S.HOLD),
        Action.REACTIVATE: StatusIn(S.INACTIVE, S.HOLD),
        Action.INVITE: ApprovalIn(A.APPROVED) & StatusKnownNotIn(S.INACTIVE, S.HOLD),
    }
)

del A, S


def rule_allows(action: Action, event: Event | None) -> bool:
    """Status condition for *action* on *event*; ``False`` for a missing event."""
    if event is None:
        return False
    return ACTION_RULES[action].is_satisfied_by(event)


__all__ = [
    "ACTION_RULES",
    "Action",
    "ApprovalIn",
    "StatusIn",
    "StatusKnownNotIn",
    "rule_allows",
]
