"""Unit tests for AuthorizationSession."""

from __future__ import annotations

from typing import Any

import structlog

from eventgate.application.gate import ActionGate
from eventgate.application.session import AuthorizationSession
from eventgate.config import EngineSettings
from eventgate.kernel.security import PermissionCache, Principal
from eventgate.observability.logging import AuditLogger
from eventgate.testing import make_event, make_principal


class RecordingLogger:
    def __init__(self) -> None:
        self.entries: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **fields: Any) -> None:
        self.entries.append((event, fields))


class TestLoginLogout:
    def test_login_returns_permissions(self, session: AuthorizationSession, admin: Principal) -> None:
        perms = session.login(admin)
        assert perms == admin.resolved_role.permissions  # type: ignore[union-attr]
        assert session.principal is admin

    def test_login_starts_from_empty_cache(self, session: AuthorizationSession, admin: Principal, attendee: Principal) -> None:
        session.permissions_of(attendee)
        session.login(admin)
        assert len(session.cache) == 1

    def test_logout_clears_cache_and_principal(self, session: AuthorizationSession, admin: Principal) -> None:
        session.login(admin)
        session.logout()
        assert session.principal is None
        assert len(session.cache) == 0

    def test_login_binds_principal_context(self, session: AuthorizationSession, admin: Principal) -> None:
        session.login(admin)
        assert structlog.contextvars.get_contextvars()["principal_id"] == "7"
        session.logout()
        assert "principal_id" not in structlog.contextvars.get_contextvars()

    def test_login_without_principal(self, session: AuthorizationSession) -> None:
        assert session.login(None) == frozenset()

    def test_clear_cache_is_idempotent(self, session: AuthorizationSession, admin: Principal) -> None:
        session.login(admin)
        session.clear_cache()
        session.clear_cache()
        assert len(session.cache) == 0

    def test_shared_cache_handle(self, permission_cache: PermissionCache, session: AuthorizationSession) -> None:
        assert session.cache is permission_cache


class TestQueries:
    def test_permission_queries(self, session: AuthorizationSession, admin: Principal) -> None:
        assert session.has_permission(admin, "event.manage.own") is True
        assert session.has_any(admin, ["nope", "event.view.all"]) is True
        assert session.has_all(admin, ["event.manage.own", "nope"]) is False

    def test_access_queries(self, session: AuthorizationSession, admin: Principal) -> None:
        event = make_event(created_by="a@x.com")
        assert session.can_view(admin, event) is True
        assert session.can_manage(admin, event) is True
        assert session.can_manage(admin, make_event(created_by="bob")) is False

    def test_role_change_seen_after_clear(self, session: AuthorizationSession) -> None:
        before = make_principal("Attendee", ["event.attend"], role_id="r1")
        after = make_principal("Attendee", ["event.attend", "event.invite"], role_id="r1")
        assert session.has_permission(before, "event.invite") is False
        assert session.has_permission(after, "event.invite") is False
        session.clear_cache()
        assert session.has_permission(after, "event.invite") is True


class TestFromSettings:
    def test_role_names_from_settings(self) -> None:
        session = AuthorizationSession.from_settings(EngineSettings(super_admin_role="Root"))
        assert session.can_manage(make_principal("Root"), make_event()) is True
        assert session.can_manage(make_principal("SuperAdmin"), make_event()) is False

    def test_audit_enabled(self) -> None:
        session = AuthorizationSession.from_settings(EngineSettings(audit_decisions=True))
        assert session._audit is not None


class TestAudit:
    def test_gate_and_session_audited(self, admin: Principal) -> None:
        sink = RecordingLogger()
        session = AuthorizationSession(audit=AuditLogger(logger=sink))
        session.login(admin)
        session.compute_gate(admin, make_event(created_by="alice"))
        session.logout()
        names = [name for name, _ in sink.entries]
        assert names == ["audit.login", "audit.gate", "audit.logout"]
        gate_fields = sink.entries[1][1]
        assert gate_fields["principal_id"] == "7"
        assert gate_fields["allowed"] == ["approve", "delete", "edit", "reject"]

    def test_no_audit_by_default(self, session: AuthorizationSession, admin: Principal) -> None:
        assert session.compute_gate(admin, make_event()).can_view is True


class TestMalformedRole:
    def test_raw_string_role_fails_closed(self, session: AuthorizationSession) -> None:
        principal = Principal(id="7", email="a@x.com", name="alice", role="Admin")  # type: ignore[arg-type]
        event = make_event(created_by="a@x.com")
        assert principal.role_name is None
        assert principal.resolved_role is None
        assert session.login(principal) == frozenset()
        assert session.permissions_of(principal) == frozenset()
        assert session.has_permission(principal, "event.manage.own") is False
        assert session.has_any(principal, ["event.manage.own"]) is False
        assert session.has_all(principal, ["event.manage.own"]) is False
        assert session.can_view(principal, event) is False
        assert session.can_manage(principal, event) is False
        assert session.compute_gate(principal, event) == ActionGate.denied()
        assert len(session.cache) == 0
