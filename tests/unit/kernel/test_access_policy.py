"""Unit tests for AccessPolicyEvaluator."""

from __future__ import annotations

from hypothesis import given

from eventgate.kernel.events import Event, Invitation, InvitationStatus, Visibility, event_from_payload
from eventgate.kernel.security import (
    AccessPolicyEvaluator,
    Principal,
    RoleNames,
    can_manage,
    can_view,
    is_invited,
)
from eventgate.testing import make_event, make_principal
from eventgate.testing.strategies import events

_PRIVATE = Visibility.PRIVATE


# ---------------------------------------------------------------------------
# can_view
# ---------------------------------------------------------------------------


class TestCanView:
    @given(events())
    def test_super_admin_sees_everything(self, event: Event) -> None:
        assert can_view(make_principal("SuperAdmin"), event) is True

    @given(events())
    def test_admin_sees_everything(self, event: Event) -> None:
        assert can_view(make_principal("Admin"), event) is True

    def test_attendee_sees_public(self, attendee: Principal) -> None:
        assert can_view(attendee, make_event()) is True

    def test_attendee_denied_private_without_invitation(self, attendee: Principal) -> None:
        assert can_view(attendee, make_event(visibility=_PRIVATE)) is False

    def test_attendee_sees_private_when_invited(self, attendee: Principal) -> None:
        event = make_event(visibility=_PRIVATE, invited=["guest@x.com"])
        assert can_view(attendee, event) is True

    def test_declined_invitation_still_grants_view(self, attendee: Principal) -> None:
        invitations = [Invitation("guest@x.com", InvitationStatus.DECLINED)]
        assert can_view(attendee, make_event(visibility=_PRIVATE), invitations) is True

    def test_explicit_invitations_replace_event_list(self, attendee: Principal) -> None:
        event = make_event(visibility=_PRIVATE, invited=["guest@x.com"])
        assert can_view(attendee, event, []) is False

    def test_missing_visibility_is_not_public(self, attendee: Principal) -> None:
        assert can_view(attendee, make_event(visibility=None)) is False

    def test_unknown_role(self) -> None:
        assert can_view(make_principal("Auditor"), make_event()) is False

    def test_unresolved_role_fails_closed(self) -> None:
        assert can_view(make_principal("SuperAdmin", unresolved=True), make_event()) is False

    def test_missing_inputs(self) -> None:
        assert can_view(None, make_event()) is False
        assert can_view(make_principal("SuperAdmin"), None) is False


# ---------------------------------------------------------------------------
# can_manage
# ---------------------------------------------------------------------------


class TestCanManage:
    @given(events())
    def test_super_admin_manages_everything(self, event: Event) -> None:
        assert can_manage(make_principal("SuperAdmin"), event) is True

    def test_admin_manages_own_event(self, admin: Principal) -> None:
        assert can_manage(admin, make_event(created_by="a@x.com", organizer_id="99")) is True

    def test_admin_manages_own_event_without_organizer(self, admin: Principal) -> None:
        assert can_manage(admin, make_event(created_by="a@x.com", organizer_id=None)) is True

    def test_admin_cannot_manage_others(self, admin: Principal) -> None:
        assert can_manage(admin, make_event(created_by="bob", organizer_id="99")) is False

    @given(events())
    def test_attendee_never_manages(self, event: Event) -> None:
        attendee = make_principal("Attendee", id="7", email="a@x.com")
        assert can_manage(attendee, event) is False

    def test_unresolved_admin_fails_closed(self) -> None:
        principal = make_principal("Admin", unresolved=True)
        assert can_manage(principal, make_event(created_by="7")) is False

    def test_manage_independent_of_view(self, admin: Principal) -> None:
        event = make_event(visibility=_PRIVATE, created_by="alice")
        assert can_manage(admin, event) is True

    def test_embedded_organizer_id_grants_manage(self, admin: Principal) -> None:
        event = event_from_payload({"organizer": {"id": 7}, "organizerId": 5})
        assert can_manage(admin, event) is True

    def test_missing_inputs(self) -> None:
        assert can_manage(None, make_event()) is False
        assert can_manage(make_principal("SuperAdmin"), None) is False


class TestRoleNames:
    def test_custom_names(self) -> None:
        policy = AccessPolicyEvaluator(RoleNames(super_admin="Root", admin="Staff", attendee="Guest"))
        assert policy.can_manage(make_principal("Root"), make_event()) is True
        assert policy.can_manage(make_principal("SuperAdmin"), make_event()) is False
        assert policy.can_view(make_principal("Guest"), make_event()) is True

    def test_names_are_case_sensitive(self) -> None:
        assert can_manage(make_principal("superadmin"), make_event()) is False


class TestIsInvited:
    def test_email_is_stripped(self) -> None:
        principal = make_principal(email=" guest@x.com ")
        assert is_invited(principal, [Invitation("guest@x.com")]) is True

    def test_dict_entries_accepted(self) -> None:
        principal = make_principal(email="guest@x.com")
        assert is_invited(principal, [{"email": "guest@x.com"}]) is True  # type: ignore[list-item]

    def test_malformed_entries_skipped(self) -> None:
        principal = make_principal(email="guest@x.com")
        assert is_invited(principal, [None, Invitation(None), {"name": "x"}]) is False  # type: ignore[list-item]

    def test_principal_without_email(self) -> None:
        assert is_invited(make_principal(email=None), [Invitation("guest@x.com")]) is False
