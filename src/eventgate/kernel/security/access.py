"""Kernel security – AccessPolicyEvaluator.

Decides whether a principal may *view* or *manage* one event.

========== ===================================== ================================
Role       can_view                              can_manage
========== ===================================== ================================
SuperAdmin always                                always
Admin      always                                owns the event (:mod:`.ownership`)
Attendee   public event, or invited (any status) never
other      never                                 never
========== ===================================== ================================

Only a :class:`ResolvedRole` is matched against role names; a bare
:class:`UnresolvedRole` is treated like an unknown role.  Missing
principals, events or fields resolve to ``False``.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable

from eventgate.kernel.events import Event, Invitation, Visibility
from eventgate.kernel.identity import identity_text
from eventgate.kernel.security.ownership import OWNERSHIP_KEYS, OwnershipKey, is_owner
from eventgate.kernel.security.principal import Principal
from eventgate.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class RoleNames:
    """The role names the policy recognises."""

    super_admin: str = "SuperAdmin"
    admin: str = "Admin"
    attendee: str = "Attendee"


class AccessPolicyEvaluator:
    """Pure view/manage decisions for (principal, event) pairs."""

    def __init__(
        self,
        roles: RoleNames | None = None,
        *,
        ownership_keys: Iterable[OwnershipKey] = OWNERSHIP_KEYS,
    ) -> None:
        self._roles = roles or RoleNames()
        self._ownership_keys = tuple(ownership_keys)

    @property
    def roles(self) -> RoleNames:
        return self._roles

    def _role_of(self, principal: Principal | None) -> str | None:
        if principal is None:
            return None
        role = principal.resolved_role
        return role.name if role is not None else None

    def can_view(
        self,
        principal: Principal | None,
        event: Event | None,
        invitations: Iterable[Invitation] | None = None,
    ) -> bool:
        """May *principal* see *event*?

        *invitations* defaults to the event's own attendee list.
        """
        if event is None:
            return False
        role = self._role_of(principal)
        if role is None:
            return False
        if role in (self._roles.super_admin, self._roles.admin):
            return True
        if role == self._roles.attendee:
            if event.visibility is Visibility.PUBLIC:
                return True
            if is_invited(principal, event.attendees if invitations is None else invitations):
                return True
            _log.debug("access.view_denied", principal_id=principal.id, event_id=event.id)
        return False

    def can_manage(self, principal: Principal | None, event: Event | None) -> bool:
        """May *principal* edit or moderate *event*?  Independent of :meth:`can_view`."""
        if event is None:
            return False
        role = self._role_of(principal)
        if role == self._roles.super_admin:
            return True
        if role == self._roles.admin:
            return is_owner(principal, event, self._ownership_keys)
        return False


def _invitation_email(invitation: object) -> str | None:
    match invitation:
        case Invitation(email=email):
            return identity_text(email)
        case {"email": email}:
            return identity_text(email)
        case _:
            return None


def is_invited(principal: Principal | None, invitations: Iterable[Invitation] | None) -> bool:
    """``True`` if *principal*'s email appears in *invitations*, whatever the status."""
    if principal is None or invitations is None:
        return False
    email = identity_text(principal.email)
    if email is None:
        return False
    return any(_invitation_email(invitation) == email for invitation in invitations)


def can_view(
    principal: Principal | None,
    event: Event | None,
    invitations: Iterable[Invitation] | None = None,
) -> bool:
    """:meth:`AccessPolicyEvaluator.can_view` with the default role names."""
    return AccessPolicyEvaluator().can_view(principal, event, invitations)


def can_manage(principal: Principal | None, event: Event | None) -> bool:
    """:meth:`AccessPolicyEvaluator.can_manage` with the default role names."""
    return AccessPolicyEvaluator().can_manage(principal, event)


__all__ = [
    "AccessPolicyEvaluator",
    "RoleNames",
    "can_manage",
    "can_view",
    "is_invited",
]
