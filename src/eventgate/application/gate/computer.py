"""Action gate computer – which actions a principal may surface on an event.

Composes the access policy (view / manage) with :data:`ACTION_RULES`.  Every
action additionally requires ``can_manage``; a principal who cannot manage
the event gets an all-false action set whatever the event's state.

The gate is recomputed from scratch on every call and holds no state.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from eventgate.application.lifecycle.rules import ACTION_RULES, Action
from eventgate.kernel.events import Event, Invitation
from eventgate.kernel.security.access import AccessPolicyEvaluator
from eventgate.kernel.security.principal import Principal


@dataclasses.dataclass(frozen=True)
class ActionGate:
    """Immutable decision record for one (principal, event) pair."""

    can_view: bool = False
    can_manage: bool = False
    edit: bool = False
    delete: bool = False
    approve: bool = False
    reject: bool = False
    hold: bool = False
    reactivate: bool = False
    invite: bool = False

    @classmethod
    def denied(cls) -> "ActionGate":
        return cls()

    def allows(self, action: Action) -> bool:
        return bool(getattr(self, action.value))

    def allowed_actions(self) -> frozenset[Action]:
        return frozenset(action for action in Action if self.allows(action))

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


class GateComputer:
    """Builds :class:`ActionGate` records from an :class:`AccessPolicyEvaluator`."""

    def __init__(self, policy: AccessPolicyEvaluator | None = None) -> None:
        self._policy = policy or AccessPolicyEvaluator()

    def compute(
        self,
        principal: Principal | None,
        event: Event | None,
        invitations: Iterable[Invitation] | None = None,
    ) -> ActionGate:
        if principal is None or event is None:
            return ActionGate.denied()
        if invitations is not None:
            invitations = tuple(invitations)
        viewable = self._policy.can_view(principal, event, invitations)
        manageable = self._policy.can_manage(principal, event)
        flags = {
            action.value: manageable and rule.is_satisfied_by(event)
            for action, rule in ACTION_RULES.items()
        }
        return ActionGate(can_view=viewable, can_manage=manageable, **flags)


def compute_gate(
    principal: Principal | None,
    event: Event | None,
    invitations: Iterable[Invitation] | None = None,
    *,
    policy: AccessPolicyEvaluator | None = None,
) -> ActionGate:
    """Compute the :class:`ActionGate` for *principal* on *event*."""
    return GateComputer(policy).compute(principal, event, invitations)


__all__ = ["ActionGate", "GateComputer", "compute_gate"]
