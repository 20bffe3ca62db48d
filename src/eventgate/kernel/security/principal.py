"""Kernel security – Principal and its role assignment.

A user fetched from the backend carries its role in one of two shapes:

* a role object with a permission list  → :class:`ResolvedRole`
* a bare role-name string (legacy data) → :class:`UnresolvedRole`

Both shapes are real and are kept apart as a tagged union; code that needs
the role's data matches on the variant instead of probing types.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, TypeAlias

from eventgate.kernel.identity import identity_text


@dataclasses.dataclass(frozen=True)
class ResolvedRole:
    """Role object carrying its permission set."""

    name: str
    id: str | None = None
    permissions: frozenset[str] = frozenset()

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class UnresolvedRole:
    """Legacy role given only by name; grants nothing."""

    name: str

    def __str__(self) -> str:
        return self.name


RoleAssignment: TypeAlias = ResolvedRole | UnresolvedRole | None


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated user whose rights are being evaluated."""

    id: str | None = None
    email: str | None = None
    name: str | None = None
    full_name: str | None = None
    role: RoleAssignment = None

    @property
    def role_name(self) -> str | None:
        """Name of the role as given, resolved or not."""
        match self.role:
            case ResolvedRole(name=name) | UnresolvedRole(name=name):
                return name
            case _:
                return None

    @property
    def resolved_role(self) -> ResolvedRole | None:
        """The role if it carries permission data, else ``None``."""
        match self.role:
            case ResolvedRole():
                return self.role
            case _:
                return None


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------


def _permission_names(raw: Any) -> frozenset[str]:
    if not isinstance(raw, (list, tuple)):
        return frozenset()
    names: set[str] = set()
    for entry in raw:
        if isinstance(entry, dict):
            entry = entry.get("name")
        name = identity_text(entry)
        if name is not None:
            names.add(name)
    return frozenset(names)


def role_from_payload(raw: Any) -> RoleAssignment:
    """Build a role assignment from the ``role`` field of a user payload."""
    if isinstance(raw, str):
        name = raw.strip()
        return UnresolvedRole(name) if name else None
    if isinstance(raw, dict):
        name = identity_text(raw.get("name"))
        if name is None:
            return None
        return ResolvedRole(
            name=name,
            id=identity_text(raw.get("id")),
            permissions=_permission_names(raw.get("permissions")),
        )
    return None


def principal_from_payload(payload: dict[str, Any] | None) -> Principal | None:
    """Parse a REST user object; returns ``None`` when there is nothing to parse."""
    if not isinstance(payload, dict):
        return None
    return Principal(
        id=identity_text(payload.get("id")),
        email=identity_text(payload.get("email")),
        name=identity_text(payload.get("name")),
        full_name=identity_text(payload.get("fullName", payload.get("full_name"))),
        role=role_from_payload(payload.get("role")),
    )


def make_role(name: str, permissions: Iterable[str] = (), *, id: str | None = None) -> ResolvedRole:
    """Convenience constructor for a :class:`ResolvedRole`."""
    return ResolvedRole(name=name, id=id, permissions=frozenset(permissions))


__all__ = [
    "Principal",
    "ResolvedRole",
    "RoleAssignment",
    "UnresolvedRole",
    "make_role",
    "principal_from_payload",
    "role_from_payload",
]
