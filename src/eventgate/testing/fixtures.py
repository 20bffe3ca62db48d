"""Testing fixtures – pytest fixtures for sessions, principals and clocks.

Register in your ``conftest.py``::

    pytest_plugins = ["eventgate.testing.fixtures"]
"""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Iterator

import pytest

from eventgate.application.session import AuthorizationSession
from eventgate.kernel.security import EventPermissions, PermissionCache, Principal
from eventgate.kernel.time import FrozenClock
from eventgate.testing.builders import make_principal


@pytest.fixture
def permission_cache() -> PermissionCache:
    return PermissionCache()


@pytest.fixture
def session(permission_cache: PermissionCache) -> Iterator[AuthorizationSession]:
    """A fresh session with default role names, logged out at teardown."""
    s = AuthorizationSession(cache=permission_cache)
    yield s
    s.logout()


@pytest.fixture
def super_admin() -> Principal:
    return make_principal(
        "SuperAdmin",
        [EventPermissions.MANAGE_ALL, EventPermissions.VIEW_ALL, EventPermissions.APPROVE],
        id="1",
        email="root@x.com",
        name="root",
        full_name="Root User",
    )


@pytest.fixture
def admin() -> Principal:
    """Admin with ``id=7`` and ``email="a@x.com"``."""
    return make_principal(
        "Admin",
        [EventPermissions.MANAGE_OWN, EventPermissions.VIEW_ALL],
    )


@pytest.fixture
def attendee() -> Principal:
    return make_principal(
        "Attendee",
        [EventPermissions.VIEW_PUBLIC, EventPermissions.VIEW_INVITED, EventPermissions.ATTEND],
        id="42",
        email="guest@x.com",
        name="guest",
        full_name="Guest User",
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 5, 1, 12, 0, tzinfo=UTC))


__all__ = [
    "admin",
    "attendee",
    "frozen_clock",
    "permission_cache",
    "session",
    "super_admin",
]
