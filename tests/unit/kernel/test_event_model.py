"""Unit tests for the event model and payload parsing."""

from __future__ import annotations

from datetime import UTC, datetime

from eventgate.kernel.events import (
    ApprovalStatus,
    EventStatus,
    Invitation,
    InvitationStatus,
    OrganizerRef,
    Visibility,
    event_from_payload,
    invitations_from_payload,
)
from eventgate.testing import make_event


class TestEventFromPayload:
    def test_camel_case_payload(self) -> None:
        event = event_from_payload(
            {
                "id": 12,
                "title": "Launch",
                "visibility": "private",
                "approvalStatus": "APPROVED",
                "eventStatus": "ACTIVE",
                "createdBy": "Alice Example",
                "organizerId": 7,
                "attendees": [{"email": "guest@x.com", "invitationStatus": "ACCEPTED"}],
                "startTime": "2026-05-01T10:00:00+00:00",
                "endTime": "2026-05-01T14:00:00+00:00",
                "remarks": "ok",
            }
        )
        assert event is not None
        assert event.id == "12"
        assert event.visibility is Visibility.PRIVATE
        assert event.approval_status is ApprovalStatus.APPROVED
        assert event.event_status is EventStatus.ACTIVE
        assert event.organizer_id == "7"
        assert event.attendees == (Invitation("guest@x.com", InvitationStatus.ACCEPTED),)
        assert event.start_time == datetime(2026, 5, 1, 10, tzinfo=UTC)
        assert event.remarks == "ok"

    def test_aliases(self) -> None:
        event = event_from_payload({"name": "Meetup", "status": "hold", "date": "2026-05-01T10:00:00"})
        assert event is not None
        assert event.title == "Meetup"
        assert event.event_status is EventStatus.HOLD
        assert event.start_time == datetime(2026, 5, 1, 10)

    def test_unknown_values_become_none(self) -> None:
        event = event_from_payload(
            {"approvalStatus": "CANCELLED", "eventStatus": 3, "startTime": "soon", "remarks": 5}
        )
        assert event is not None
        assert event.approval_status is None
        assert event.event_status is None
        assert event.start_time is None
        assert event.remarks is None

    def test_organizer_object(self) -> None:
        event = event_from_payload({"organizer": {"id": 4, "fullName": "Dana", "email": "d@x.com"}})
        assert event is not None
        assert event.organizer == OrganizerRef(id="4", name="Dana", email="d@x.com")

    def test_pre_hold_status(self) -> None:
        event = event_from_payload({"eventStatus": "HOLD", "preHoldStatus": "ACTIVE"})
        assert event is not None
        assert event.pre_hold_status is EventStatus.ACTIVE

    def test_non_dict_gives_none(self) -> None:
        assert event_from_payload(None) is None
        assert event_from_payload("event") is None  # type: ignore[arg-type]


class TestInvitationsFromPayload:
    def test_entries_without_email_dropped(self) -> None:
        parsed = invitations_from_payload([{"email": ""}, {"status": "ACCEPTED"}, "x", {"email": "g@x.com"}])
        assert parsed == (Invitation("g@x.com", InvitationStatus.PENDING),)

    def test_status_aliases(self) -> None:
        parsed = invitations_from_payload(
            [
                {"email": "a@x.com", "invitation_status": "declined"},
                {"email": "b@x.com", "status": "ACCEPTED"},
                {"email": "c@x.com", "status": "MAYBE"},
            ]
        )
        assert [i.invitation_status for i in parsed] == [
            InvitationStatus.DECLINED,
            InvitationStatus.ACCEPTED,
            None,
        ]

    def test_non_list_gives_empty(self) -> None:
        assert invitations_from_payload(None) == ()


class TestEvent:
    def test_is_public(self) -> None:
        assert make_event().is_public is True
        assert make_event(visibility=Visibility.PRIVATE).is_public is False
        assert make_event(visibility=None).is_public is False

    def test_builder_converts_strings(self) -> None:
        event = make_event("APPROVED", "ACTIVE", visibility="PRIVATE")
        assert event.approval_status is ApprovalStatus.APPROVED
        assert event.event_status is EventStatus.ACTIVE
        assert event.visibility is Visibility.PRIVATE
