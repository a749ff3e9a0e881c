"""In-process implementation of the EventStore.

Serializes writes to each event behind a per-event lock, for storage
without conditional updates. Used by unit tests and local tooling.
"""

import threading
import uuid
from collections import defaultdict
from dataclasses import replace
from datetime import UTC, datetime

from gatherings.domain import (
    Event,
    EventCriteria,
    EventDraft,
    EventId,
    EventPatch,
    Quantity,
    TicketInventory,
    UserRef,
)
from gatherings.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dictionary-backed event store safe for concurrent callers."""

    def __init__(self, users: list[UserRef] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        self._users: dict[int, UserRef] = {user.id: user for user in users or []}
        self._registry_lock = threading.Lock()
        self._event_locks: defaultdict[EventId, threading.Lock] = defaultdict(threading.Lock)

    def add_user(self, user: UserRef) -> None:
        self._users[user.id] = user

    def put_event(self, event: Event) -> None:
        """Store ``event`` as is, inventory and attendees included."""
        with self._lock_for(event.id):
            self._events[event.id] = event

    def _lock_for(self, event_id: EventId) -> threading.Lock:
        with self._registry_lock:
            return self._event_locks[event_id]

    def list_events(self) -> list[Event]:
        return sorted(self._events.values(), key=lambda event: event.date)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def find_events(self, criteria: EventCriteria) -> list[Event]:
        return [event for event in self.list_events() if criteria.matches(event)]

    def create_event(self, draft: EventDraft, organizer_id: int) -> Event:
        now = datetime.now(UTC)
        organizer = self._users.get(organizer_id, UserRef(id=organizer_id, name=""))
        event = Event(
            id=EventId(value=uuid.uuid4()),
            title=draft.title,
            subtitle=draft.subtitle,
            description=draft.description,
            date=draft.date,
            location=draft.location,
            organizer=organizer,
            trending=draft.trending,
            photo=draft.photo,
            tickets=TicketInventory(limit=draft.limit),
            created_at=now,
            updated_at=now,
        )
        self.put_event(event)
        return event

    def update_event(self, event_id: EventId, patch: EventPatch) -> Event | None:
        with self._lock_for(event_id):
            stored = self._events.get(event_id)
            if stored is None:
                return None
            updated = replace(stored.apply(patch), updated_at=datetime.now(UTC))
            self._events[event_id] = updated
            return updated

    def delete_event(self, event_id: EventId) -> bool:
        with self._lock_for(event_id):
            deleted = self._events.pop(event_id, None) is not None
        with self._registry_lock:
            self._event_locks.pop(event_id, None)
        return deleted

    def increment_tickets_sold(self, event_id: EventId, quantity: Quantity) -> Event | None:
        with self._lock_for(event_id):
            stored = self._events.get(event_id)
            if stored is None or not stored.tickets.can_sell(quantity):
                return None
            updated = replace(
                stored,
                tickets=stored.tickets.sell(quantity),
                updated_at=datetime.now(UTC),
            )
            self._events[event_id] = updated
            return updated

    def add_attendee(self, event_id: EventId, user_id: int) -> Event | None:
        with self._lock_for(event_id):
            stored = self._events.get(event_id)
            if stored is None or stored.has_attendee(user_id):
                return None
            attendee = self._users.get(user_id, UserRef(id=user_id, name=""))
            updated = replace(stored, attendees=stored.attendees + (attendee,))
            self._events[event_id] = updated
            return updated

    def get_user(self, user_id: int) -> UserRef | None:
        return self._users.get(user_id)
