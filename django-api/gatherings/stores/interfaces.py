"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.

Ticket inventory and attendees are shared between concurrent requests.
They change only through ``increment_tickets_sold`` and ``add_attendee``,
each of which is a single atomic conditional write.
"""

from abc import ABC, abstractmethod

from gatherings.domain import Event, EventCriteria, EventDraft, EventId, EventPatch, Quantity, UserRef


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_events(self, criteria: EventCriteria) -> list[Event]:
        """Return events matching ``criteria``, ordered by date ascending."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, organizer_id: int) -> Event:
        """Persist a new event with no tickets sold and no attendees."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, patch: EventPatch) -> Event | None:
        """Write only the fields present in ``patch``.

        Every other column, ticket inventory and attendees included, is left
        as stored. Returns None if the event no longer exists.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Returns False if it did not exist."""
        ...

    @abstractmethod
    def increment_tickets_sold(self, event_id: EventId, quantity: Quantity) -> Event | None:
        """Add ``quantity`` to the sold count only if it stays within the limit.

        Returns the updated event, or None when no event matched the
        condition (missing, or not enough tickets left).
        """
        ...

    @abstractmethod
    def add_attendee(self, event_id: EventId, user_id: int) -> Event | None:
        """Add ``user_id`` to the attendees only if absent.

        Returns the updated event, or None when no event matched the
        condition (missing, or the user already attends).
        """
        ...

    @abstractmethod
    def get_user(self, user_id: int) -> UserRef | None:
        """Return a user reference, or None if the user does not exist."""
        ...
