"""Event lifecycle – action rules, transitions and time-based progression."""
from eventgate.application.lifecycle.rules import (
    ACTION_RULES,
    Action,
    ApprovalIn,
    StatusIn,
    StatusKnownNotIn,
    rule_allows,
)
from eventgate.application.lifecycle.transition import TransitionResult
from eventgate.application.lifecycle.machine import (
    LifecycleMachine,
    approve,
    hold,
    progress,
    reactivate,
    reject,
)

__all__ = [
    "ACTION_RULES",
    "Action",
    "ApprovalIn",
    "LifecycleMachine",
    "StatusIn",
    "StatusKnownNotIn",
    "TransitionResult",
    "approve",
    "hold",
    "progress",
    "reactivate",
    "reject",
    "rule_allows",
]
