"""Event lifecycle state machine.

Two independent axes:

* approval    PENDING ──approve──▶ APPROVED
                      └─reject───▶ REJECTED           (both terminal)
* operational any except HOLD/INACTIVE ──hold──▶ HOLD   (approved events only)
              HOLD | INACTIVE ──reactivate──▶ <recorded pre-hold status>
              UPCOMING ──time──▶ ACTIVE ──time──▶ COMPLETED

Manual transitions are legal exactly when :data:`ACTION_RULES` allows the
matching action.  They never raise: a refused transition comes back as a
:class:`TransitionResult` carrying the error.  Events are immutable; a
successful transition returns a new value.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any, Callable

from eventgate.application.lifecycle.rules import Action, rule_allows
from eventgate.application.lifecycle.transition import TransitionResult
from eventgate.kernel.errors import (
    DomainError,
    InvalidTransitionError,
    RemarksRequiredError,
    UnknownPriorStateError,
)
from eventgate.kernel.events import ApprovalStatus, Event, EventStatus
from eventgate.kernel.time import Clock, SystemClock
from eventgate.observability.logging import get_logger

_log = get_logger(__name__)

_PAUSED = frozenset({EventStatus.HOLD, EventStatus.INACTIVE})
_PROGRESSION = (EventStatus.UPCOMING, EventStatus.ACTIVE, EventStatus.COMPLETED)
_TIME_DRIVEN = frozenset(_PROGRESSION[:2])


def _state(value: Any) -> str:
    return value.value if value is not None else "UNKNOWN"


def _now(at: datetime | None) -> datetime:
    return at if at is not None else datetime.now(UTC)


def _refuse(action: Action, event: Event, error: DomainError, at: datetime) -> TransitionResult:
    _log.info(
        "lifecycle.refused",
        event_id=event.id,
        action=action.value,
        code=error.code,
    )
    return TransitionResult(
        action=action, allowed=False, event=event, previous=event, error=error, occurred_at=at
    )


def _accept(action: Action, previous: Event, event: Event, at: datetime) -> TransitionResult:
    _log.info(
        "lifecycle.transition",
        event_id=event.id,
        action=action.value,
        approval=_state(event.approval_status),
        status=_state(event.event_status),
    )
    return TransitionResult(action=action, allowed=True, event=event, previous=previous, occurred_at=at)


def approve(
    event: Event,
    *,
    approved_by: str | None = None,
    at: datetime | None = None,
) -> TransitionResult:
    """PENDING → APPROVED, stamping who approved and when."""
    at = _now(at)
    if not rule_allows(Action.APPROVE, event):
        return _refuse(
            Action.APPROVE,
            event,
            InvalidTransitionError(Action.APPROVE.value, _state(event.approval_status)),
            at,
        )
    approved = dataclasses.replace(
        event,
        approval_status=ApprovalStatus.APPROVED,
        approved_by=approved_by,
        approved_at=at,
    )
    return _accept(Action.APPROVE, event, approved, at)


def reject(
    event: Event,
    remarks: str | None,
    *,
    approved_by: str | None = None,
    at: datetime | None = None,
) -> TransitionResult:
    """PENDING → REJECTED.  Remarks are mandatory."""
    at = _now(at)
    if not rule_allows(Action.REJECT, event):
        return _refuse(
            Action.REJECT,
            event,
            InvalidTransitionError(Action.REJECT.value, _state(event.approval_status)),
            at,
        )
    if not isinstance(remarks, str) or not remarks.strip():
        return _refuse(Action.REJECT, event, RemarksRequiredError(), at)
    rejected = dataclasses.replace(
        event,
        approval_status=ApprovalStatus.REJECTED,
        remarks=remarks.strip(),
        approved_by=approved_by,
        approved_at=at,
    )
    return _accept(Action.REJECT, event, rejected, at)


def hold(event: Event, *, at: datetime | None = None) -> TransitionResult:
    """Put an approved event on HOLD, recording the status it held before."""
    at = _now(at)
    if not rule_allows(Action.HOLD, event):
        return _refuse(
            Action.HOLD,
            event,
            InvalidTransitionError(Action.HOLD.value, _state(event.event_status)),
            at,
        )
    held = dataclasses.replace(
        event,
        event_status=EventStatus.HOLD,
        pre_hold_status=event.event_status,
    )
    return _accept(Action.HOLD, event, held, at)


def reactivate(event: Event, *, at: datetime | None = None) -> TransitionResult:
    """Leave HOLD/INACTIVE, restoring the recorded pre-hold status.

    Events paused outside :func:`hold` carry no such record and are refused
    with :class:`UnknownPriorStateError`.  A held COMPLETED event comes back
    as COMPLETED: the record only restores a status progression reached.
    """
    at = _now(at)
    if not rule_allows(Action.REACTIVATE, event):
        return _refuse(
            Action.REACTIVATE,
            event,
            InvalidTransitionError(Action.REACTIVATE.value, _state(event.event_status)),
            at,
        )
    restored = event.pre_hold_status
    if restored is None or restored in _PAUSED:
        return _refuse(Action.REACTIVATE, event, UnknownPriorStateError(event.id), at)
    reactivated = dataclasses.replace(event, event_status=restored, pre_hold_status=None)
    return _accept(Action.REACTIVATE, event, reactivated, at)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def progress(event: Event, now: datetime) -> Event:
    """Apply time-based progression: UPCOMING → ACTIVE → COMPLETED.

    Only UPCOMING and ACTIVE events with both start and end times move;
    anything else is returned unchanged, and an event never moves back
    along the progression.  Naive datetimes are read as UTC.
    """
    if event.event_status not in _TIME_DRIVEN or event.start_time is None or event.end_time is None:
        return event
    current = _as_utc(now)
    if current >= _as_utc(event.end_time):
        target = EventStatus.COMPLETED
    elif current >= _as_utc(event.start_time):
        target = EventStatus.ACTIVE
    else:
        target = EventStatus.UPCOMING
    if _PROGRESSION.index(target) <= _PROGRESSION.index(event.event_status):
        return event
    _log.debug(
        "lifecycle.progressed",
        event_id=event.id,
        from_status=event.event_status.value,
        to_status=target.value,
    )
    return dataclasses.replace(event, event_status=target)


class LifecycleMachine:
    """Lifecycle transitions bound to a clock.

    Example::

        machine = LifecycleMachine()
        result = machine.apply(Action.HOLD, event)
        if result:
            save(result.event)
    """

    TRANSITIONS = frozenset({Action.APPROVE, Action.REJECT, Action.HOLD, Action.REACTIVATE})

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def can(self, action: Action, event: Event | None) -> bool:
        """Whether the status rule for *action* holds; no permission check."""
        return rule_allows(action, event)

    def approve(self, event: Event, *, approved_by: str | None = None) -> TransitionResult:
        return approve(event, approved_by=approved_by, at=self._clock.now())

    def reject(self, event: Event, remarks: str | None, *, approved_by: str | None = None) -> TransitionResult:
        return reject(event, remarks, approved_by=approved_by, at=self._clock.now())

    def hold(self, event: Event) -> TransitionResult:
        return hold(event, at=self._clock.now())

    def reactivate(self, event: Event) -> TransitionResult:
        return reactivate(event, at=self._clock.now())

    def progress(self, event: Event) -> Event:
        return progress(event, self._clock.now())

    def apply(self, action: Action, event: Event, **kwargs: Any) -> TransitionResult:
        """Dispatch *action* to its transition.

        Raises ``ValueError`` for actions that are not state transitions
        (edit, delete, invite).
        """
        handlers: dict[Action, Callable[..., TransitionResult]] = {
            Action.APPROVE: self.approve,
            Action.REJECT: self.reject,
            Action.HOLD: self.hold,
            Action.REACTIVATE: self.reactivate,
        }
        handler = handlers.get(action)
        if handler is None:
            raise ValueError(f"{action.value!r} is not a lifecycle transition")
        return handler(event, **kwargs)


__all__ = [
    "LifecycleMachine",
    "approve",
    "hold",
    "progress",
    "reactivate",
    "reject",
]
