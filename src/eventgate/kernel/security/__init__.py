"""Kernel security – principals, permission resolution, ownership and access policy."""
from eventgate.kernel.security.principal import (
    Principal,
    ResolvedRole,
    RoleAssignment,
    UnresolvedRole,
    make_role,
    principal_from_payload,
    role_from_payload,
)
from eventgate.kernel.security.permissions import (
    SYSTEM_CONFIG,
    EventPermissions,
    HistoryPermissions,
    RolePermissions,
    UserPermissions,
    all_permission_names,
)
from eventgate.kernel.security.cache import CacheStats, PermissionCache
from eventgate.kernel.security.resolver import (
    PermissionResolver,
    cache_key_for,
    resolve_permissions,
)
from eventgate.kernel.security.ownership import (
    OWNERSHIP_KEYS,
    OwnershipKey,
    is_owner,
    matching_keys,
    organizer_id_of,
    owned_events,
)
from eventgate.kernel.security.access import (
    AccessPolicyEvaluator,
    RoleNames,
    can_manage,
    can_view,
    is_invited,
)

__all__ = [
    "AccessPolicyEvaluator",
    "CacheStats",
    "EventPermissions",
    "HistoryPermissions",
    "OWNERSHIP_KEYS",
    "OwnershipKey",
    "PermissionCache",
    "PermissionResolver",
    "Principal",
    "ResolvedRole",
    "RoleAssignment",
    "RoleNames",
    "RolePermissions",
    "SYSTEM_CONFIG",
    "UnresolvedRole",
    "UserPermissions",
    "all_permission_names",
    "cache_key_for",
    "can_manage",
    "can_view",
    "is_invited",
    "is_owner",
    "make_role",
    "matching_keys",
    "organizer_id_of",
    "owned_events",
    "principal_from_payload",
    "resolve_permissions",
    "role_from_payload",
]
