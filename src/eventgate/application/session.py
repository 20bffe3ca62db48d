"""Authorization session – the boundary that owns the permission cache.

The presentation layer talks to one :class:`AuthorizationSession` per
process.  It exposes the decision queries and the single mutator,
:meth:`clear_cache`.  ``login`` starts from an empty cache and ``logout``
empties it, so a new principal never sees another principal's entries.

After any mutation that changes an event's status or a user's role, the
caller re-fetches the entity and asks again; nothing here patches a
previously computed gate.

Example::

    session = AuthorizationSession.from_settings(EngineSettings())
    session.login(principal_from_payload(me))
    gate = session.compute_gate(session.principal, event_from_payload(raw))
    if gate.approve:
        ...
    session.logout()
"""
from __future__ import annotations

from typing import Iterable

from eventgate.application.gate import ActionGate, GateComputer
from eventgate.config.settings import EngineSettings
from eventgate.kernel.events import Event, Invitation
from eventgate.kernel.security import (
    AccessPolicyEvaluator,
    PermissionCache,
    PermissionResolver,
    Principal,
    RoleNames,
)
from eventgate.observability.logging import (
    AuditLogger,
    bind_principal_context,
    clear_principal_context,
    get_logger,
)

_log = get_logger(__name__)


class AuthorizationSession:
    """Public query surface over resolver, access policy and gate computer."""

    def __init__(
        self,
        *,
        roles: RoleNames | None = None,
        cache: PermissionCache | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self._cache = cache if cache is not None else PermissionCache()
        self._resolver = PermissionResolver(self._cache)
        self._policy = AccessPolicyEvaluator(roles)
        self._gates = GateComputer(self._policy)
        self._audit = audit
        self._principal: Principal | None = None

    @classmethod
    def from_settings(cls, settings: EngineSettings, *, cache: PermissionCache | None = None) -> "AuthorizationSession":
        return cls(
            roles=settings.role_names,
            cache=cache,
            audit=AuditLogger() if settings.audit_decisions else None,
        )

    # -- session boundary ----------------------------------------------------

    @property
    def principal(self) -> Principal | None:
        """The logged-in principal, if any."""
        return self._principal

    @property
    def cache(self) -> PermissionCache:
        return self._cache

    def login(self, principal: Principal | None) -> frozenset[str]:
        """Start a session for *principal* and return its permissions."""
        self._cache.clear()
        self._principal = principal
        bind_principal_context(principal.id if principal is not None else None)
        if self._audit is not None:
            self._audit.log_session("login", principal)
        permissions = self._resolver.permissions_of(principal)
        _log.info("session.login", permissions=len(permissions))
        return permissions

    def logout(self) -> None:
        if self._audit is not None:
            self._audit.log_session("logout", self._principal)
        _log.info("session.logout")
        self._principal = None
        self._cache.clear()
        clear_principal_context()

    def clear_cache(self) -> None:
        """Drop every cached permission set.  Idempotent."""
        self._cache.clear()

    # -- queries -------------------------------------------------------------

    def permissions_of(self, principal: Principal | None) -> frozenset[str]:
        return self._resolver.permissions_of(principal)

    def has_permission(self, principal: Principal | None, name: str) -> bool:
        return self._resolver.has_permission(principal, name)

    def has_any(self, principal: Principal | None, names: Iterable[str]) -> bool:
        return self._resolver.has_any(principal, names)

    def has_all(self, principal: Principal | None, names: Iterable[str]) -> bool:
        return self._resolver.has_all(principal, names)

    def can_view(
        self,
        principal: Principal | None,
        event: Event | None,
        invitations: Iterable[Invitation] | None = None,
    ) -> bool:
        return self._policy.can_view(principal, event, invitations)

    def can_manage(self, principal: Principal | None, event: Event | None) -> bool:
        return self._policy.can_manage(principal, event)

    def compute_gate(
        self,
        principal: Principal | None,
        event: Event | None,
        invitations: Iterable[Invitation] | None = None,
    ) -> ActionGate:
        gate = self._gates.compute(principal, event, invitations)
        if self._audit is not None:
            self._audit.log_gate(principal, event, gate)
        return gate


__all__ = ["AuthorizationSession"]
