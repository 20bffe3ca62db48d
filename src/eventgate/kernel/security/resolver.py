"""Kernel security – PermissionResolver.

Derives the effective permission set of a :class:`Principal` from its role
assignment and answers membership queries over it.

Resolution rules:

* no principal, or no role                → empty set
* :class:`UnresolvedRole` (bare name)     → empty set (fail-closed)
* :class:`ResolvedRole`                   → the role's permission set, verbatim
* anything else in the role slot          → empty set (fail-closed, logged)

Results are memoised in an injected :class:`PermissionCache` keyed by the
principal id and the role identity (see :func:`cache_key_for`).  A
principal without an id has no stable key and is resolved on every call.

Example::

    cache = PermissionCache()
    resolver = PermissionResolver(cache)
    if resolver.has_any(user, [EventPermissions.MANAGE_OWN, EventPermissions.MANAGE_ALL]):
        ...
"""

from __future__ import annotations

from typing import Iterable

from eventgate.kernel.security.cache import CacheKey, PermissionCache
from eventgate.kernel.security.principal import Principal, ResolvedRole, UnresolvedRole
from eventgate.observability.logging import get_logger

_log = get_logger(__name__)

_NO_PERMISSIONS: frozenset[str] = frozenset()


def resolve_permissions(principal: Principal | None) -> frozenset[str]:
    """Compute the permission set of *principal* without any caching."""
    if principal is None:
        return _NO_PERMISSIONS
    match principal.role:
        case ResolvedRole(permissions=permissions):
            return permissions
        case UnresolvedRole(name=name):
            _log.warning(
                "permissions.unresolved_role",
                principal_id=principal.id,
                role=name,
            )
            return _NO_PERMISSIONS
        case None:
            return _NO_PERMISSIONS
        case _:
            _log.warning(
                "permissions.unresolved_role",
                principal_id=principal.id,
                role=repr(principal.role),
            )
            return _NO_PERMISSIONS


def cache_key_for(principal: Principal | None) -> CacheKey | None:
    """Return the memoisation key for *principal*, or ``None`` if it has none."""
    if principal is None or principal.id is None:
        return None
    match principal.role:
        case ResolvedRole(id=role_id, name=name):
            return (principal.id, "resolved", role_id, name)
        case UnresolvedRole(name=name):
            return (principal.id, "unresolved", name)
        case None:
            return (principal.id, "none")
        case _:
            return None


class PermissionResolver:
    """Resolves and queries permission sets through a :class:`PermissionCache`."""

    def __init__(self, cache: PermissionCache | None = None) -> None:
        self._cache = cache if cache is not None else PermissionCache()

    @property
    def cache(self) -> PermissionCache:
        return self._cache

    def permissions_of(self, principal: Principal | None) -> frozenset[str]:
        """Return the effective permission set of *principal*."""
        key = cache_key_for(principal)
        if key is None:
            return resolve_permissions(principal)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        _log.debug("permissions.cache_miss", principal_id=key[0])
        return self._cache.populate(key, resolve_permissions(principal))

    def has_permission(self, principal: Principal | None, name: str) -> bool:
        return name in self.permissions_of(principal)

    def has_any(self, principal: Principal | None, names: Iterable[str]) -> bool:
        """``True`` if *principal* holds at least one of *names*."""
        held = self.permissions_of(principal)
        return any(name in held for name in names)

    def has_all(self, principal: Principal | None, names: Iterable[str]) -> bool:
        """``True`` if every name in *names* is held; vacuously true for none."""
        held = self.permissions_of(principal)
        return all(name in held for name in names)

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = ["PermissionResolver", "cache_key_for", "resolve_permissions"]
