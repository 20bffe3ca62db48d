"""Domain errors – refused lifecycle transitions and invalid input.

These are returned as values inside a transition result; the decision
functions themselves never raise them.
"""

from __future__ import annotations

from typing import Any

from eventgate.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A domain rule was violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidTransitionError(DomainError):
    """The action is not legal from the event's current state."""

    default_code = "invalid_transition"

    def __init__(self, action: str, from_state: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot {action} an event in state '{from_state}'",
            detail={"action": action, "from_state": from_state},
            **kwargs,
        )
        self.action = action
        self.from_state = from_state


class RemarksRequiredError(ValidationError):
    """A rejection was attempted without remarks."""

    default_code = "remarks_required"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            "Remarks are mandatory when rejecting an event",
            errors=[{"field": "remarks", "reason": "blank"}],
            **kwargs,
        )


class UnknownPriorStateError(DomainError):
    """Reactivation has no recorded pre-hold state to restore."""

    default_code = "unknown_prior_state"

    def __init__(self, event_id: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Event {event_id!r} has no recorded pre-hold status to restore",
            detail={"event_id": event_id},
            **kwargs,
        )
        self.event_id = event_id


__all__ = [
    "DomainError",
    "InvalidTransitionError",
    "RemarksRequiredError",
    "UnknownPriorStateError",
    "ValidationError",
]
