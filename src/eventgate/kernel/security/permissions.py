"""Kernel security – catalog of permission names issued by the backend.

Permission names are opaque to the engine; these constants only spare call
sites from retyping string literals.
"""
from __future__ import annotations


class EventPermissions:
    MANAGE_OWN = "event.manage.own"
    MANAGE_ALL = "event.manage.all"
    VIEW_ALL = "event.view.all"
    VIEW_PUBLIC = "event.view.public"
    VIEW_INVITED = "event.view.invited"
    APPROVE = "event.approve"
    HOLD = "event.hold"
    REACTIVATE = "event.reactivate"
    INVITE = "event.invite"
    ATTEND = "event.attend"


class UserPermissions:
    MANAGE_OWN = "user.manage.own"
    MANAGE_ALL = "user.manage.all"
    VIEW_ALL = "user.view.all"
    EXPORT = "user.export"


class RolePermissions:
    MANAGE_ALL = "role.manage.all"
    VIEW_ALL = "role.view.all"


class HistoryPermissions:
    VIEW_OWN = "history.view.own"
    VIEW_ALL = "history.view.all"
    EXPORT = "history.export"
    LOGIN_VIEW_OWN = "loginhistory.view.own"
    LOGIN_VIEW_ALL = "loginhistory.view.all"
    LOGIN_EXPORT = "loginhistory.export"
    PASSWORD_VIEW_OWN = "passwordhistory.view.own"
    PASSWORD_VIEW_ALL = "passwordhistory.view.all"
    PASSWORD_EXPORT = "passwordhistory.export"


SYSTEM_CONFIG = "system.config"


def all_permission_names() -> frozenset[str]:
    """Every name in the catalog."""
    names: set[str] = {SYSTEM_CONFIG}
    for group in (EventPermissions, UserPermissions, RolePermissions, HistoryPermissions):
        names.update(
            value for key, value in vars(group).items() if key.isupper() and isinstance(value, str)
        )
    return frozenset(names)


__all__ = [
    "EventPermissions",
    "HistoryPermissions",
    "RolePermissions",
    "SYSTEM_CONFIG",
    "UserPermissions",
    "all_permission_names",
]
