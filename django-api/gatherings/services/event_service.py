"""Event service - event lifecycle business logic lives here.

Services:
- Depend only on interfaces (stores, dispatchers)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Authorization is decided before a service is called; services trust the
Caller they are given.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from gatherings.domain import Caller, Event, EventCriteria, EventDraft, EventId, EventPatch, UserRef
from gatherings.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidInputError,
    OrganizerNotFoundError,
)
from gatherings.domain.value_objects import MAX_TICKETS
from gatherings.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("title", "description", "location")


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw event ID.

    Raises:
        InvalidEventIdError: If the value is not a valid UUID.
    """
    try:
        return EventId.from_string(str(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def utc_now() -> datetime:
    return datetime.now(UTC)


def validate_draft(draft: EventDraft) -> None:
    errors: dict[str, list[str]] = {}
    for name in REQUIRED_TEXT_FIELDS:
        if not str(getattr(draft, name) or "").strip():
            errors[name] = [f"{name.capitalize()} is required"]
    if not isinstance(draft.date, datetime):
        errors["date"] = ["Valid date is required"]
    if isinstance(draft.limit, bool) or not isinstance(draft.limit, int) or draft.limit < 1:
        errors["limit"] = ["Limit must be a positive integer"]
    elif draft.limit > MAX_TICKETS:
        errors["limit"] = [f"Limit cannot exceed {MAX_TICKETS}"]
    if errors:
        raise InvalidInputError(message="Invalid event", details=errors)


class EventService:
    """Service for event lifecycle operations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = utc_now) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, caller: Caller, draft: EventDraft) -> Event:
        """Create an event organized by ``caller``.

        Raises:
            InvalidInputError: If a required field is missing or malformed.
        """
        validate_draft(draft)
        event = self._store.create_event(draft, organizer_id=caller.user_id)
        logger.info("User %s created event %s (%d tickets)", caller.user_id, event.id, draft.limit)
        return event

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def update_event(self, event_id: str, patch: EventPatch) -> Event:
        """Apply the fields present in ``patch``; everything else is kept.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        saved = self._store.update_event(parse_event_id(event_id), patch)
        if saved is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s: %s", saved.id, sorted(patch.changes()))
        return saved

    def delete_event(self, event_id: str) -> None:
        """Delete an event and its attendance.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        if not self._store.delete_event(parsed_id):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", parsed_id)

    def upcoming(self) -> list[Event]:
        """Return events dated strictly after now."""
        return self._store.find_events(EventCriteria(date_after=self._clock()))

    def past(self) -> list[Event]:
        """Return events dated at or before now."""
        return self._store.find_events(EventCriteria(date_on_or_before=self._clock()))

    def trending(self) -> list[Event]:
        """Return events flagged as trending, whatever their date."""
        return self._store.find_events(EventCriteria(trending=True))

    def get_organizer(self, user_id: int) -> UserRef:
        """Return the organizer's public details.

        Raises:
            OrganizerNotFoundError: If no such user exists.
        """
        organizer = self._store.get_user(user_id)
        if organizer is None:
            raise OrganizerNotFoundError(user_id)
        return organizer
