"""Unit tests for RsvpService.

Run with: pytest tests/test_rsvp.py -v
"""

import threading
import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from factories import MEMBER, ORGANIZER, make_event
from gatherings.domain import Caller, NotificationStatus
from gatherings.domain.errors import AlreadyRsvpedError, ErrorCode, EventNotFoundError
from gatherings.services import RsvpService


@pytest.fixture
def service(store, confirmations) -> RsvpService:
    return RsvpService(store, confirmations)


class TestRsvp:
    """Tests for RsvpService.rsvp."""

    def test_rsvp_adds_attendee(self, service, store, caller, dispatcher):
        event = make_event()
        store.put_event(event)

        confirmation = service.rsvp(str(event.id), caller)

        assert confirmation.event.attendees == (MEMBER,)
        assert confirmation.notification is NotificationStatus.SENT
        assert dispatcher.sent[0][1] == "RSVP Confirmation"

    def test_second_rsvp_is_rejected(self, service, store, caller):
        """A repeated RSVP fails and the attendee count stays 1."""
        event = make_event()
        store.put_event(event)
        service.rsvp(str(event.id), caller)

        with pytest.raises(AlreadyRsvpedError) as excinfo:
            service.rsvp(str(event.id), caller)

        assert excinfo.value.code is ErrorCode.ALREADY_RSVPED
        assert len(store.get_event(event.id).attendees) == 1

    def test_different_users_can_rsvp(self, service, store, caller):
        event = make_event()
        store.put_event(event)
        service.rsvp(str(event.id), caller)
        service.rsvp(str(event.id), Caller(user_id=ORGANIZER.id, email="org@example.com"))
        assert store.get_event(event.id).attendees == (MEMBER, ORGANIZER)

    def test_rsvp_unknown_event(self, service, caller):
        with pytest.raises(EventNotFoundError):
            service.rsvp(str(uuid.uuid4()), caller)

    def test_rsvp_does_not_touch_inventory(self, service, store, caller):
        event = make_event(limit=3, sold=3)
        store.put_event(event)
        service.rsvp(str(event.id), caller)
        assert store.get_event(event.id).tickets.sold == 3


class TestConcurrentRsvp:
    """Duplicate submissions from one user register them once."""

    def test_concurrent_duplicates_register_once(self, service, store, caller):
        event = make_event()
        store.put_event(event)
        attempts = 16
        barrier = threading.Barrier(attempts)

        def attend() -> bool:
            barrier.wait()
            try:
                service.rsvp(str(event.id), caller)
            except AlreadyRsvpedError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=attempts) as pool:
            results = list(pool.map(lambda _: attend(), range(attempts)))

        assert results.count(True) == 1
        assert store.get_event(event.id).attendees == (MEMBER,)
