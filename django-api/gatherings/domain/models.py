"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in gatherings/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from gatherings.domain.value_objects import EventId, Quantity, TicketInventory


@dataclass(frozen=True)
class UserRef:
    """A user owned by the authentication system, as shown on events."""

    id: int
    name: str


@dataclass(frozen=True)
class Caller:
    """The authenticated user behind a request.

    Supplied by the authorization gate and trusted as given.
    """

    user_id: int
    is_elevated: bool = False
    email: str = ""
    name: str = ""


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    subtitle: str
    description: str
    date: datetime
    location: str
    organizer: UserRef
    trending: bool
    photo: str | None
    tickets: TicketInventory
    attendees: tuple[UserRef, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_upcoming(self, now: datetime) -> bool:
        return self.date > now

    def has_attendee(self, user_id: int) -> bool:
        return any(attendee.id == user_id for attendee in self.attendees)

    def apply(self, patch: "EventPatch") -> "Event":
        """Return a copy with the patch's descriptive fields applied."""
        return replace(self, **patch.changes())


@dataclass(frozen=True)
class EventDraft:
    """Validated fields of an event about to be created."""

    title: str
    description: str
    date: datetime
    location: str
    limit: int
    subtitle: str = ""
    trending: bool = False
    photo: str | None = None


@dataclass(frozen=True)
class EventPatch:
    """Partial update of an event's descriptive fields.

    Missing or falsy values leave the stored value untouched. ``trending``
    is the exception: ``False`` is applied when given explicitly.
    """

    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    date: datetime | None = None
    location: str | None = None
    photo: str | None = None
    trending: bool | None = None

    def changes(self) -> dict:
        values = {
            "title": self.title,
            "subtitle": self.subtitle,
            "description": self.description,
            "date": self.date,
            "location": self.location,
            "photo": self.photo,
        }
        changed = {name: value for name, value in values.items() if value}
        if self.trending is not None:
            changed["trending"] = self.trending
        return changed


@dataclass(frozen=True)
class EventCriteria:
    """Filter over events; unset fields match everything."""

    date_after: datetime | None = None
    date_on_or_before: datetime | None = None
    trending: bool | None = None

    def matches(self, event: Event) -> bool:
        if self.date_after is not None and not event.date > self.date_after:
            return False
        if self.date_on_or_before is not None and not event.date <= self.date_on_or_before:
            return False
        if self.trending is not None and event.trending != self.trending:
            return False
        return True


class NotificationStatus(Enum):
    """Outcome of the confirmation email attached to a committed change."""

    SENT = "sent"
    FAILED = "failed"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class Receipt:
    """Result of a successful ticket purchase."""

    event: Event
    quantity: Quantity
    user_id: int
    notification: NotificationStatus = NotificationStatus.SENT
    warnings: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class RsvpConfirmation:
    """Result of a successful RSVP."""

    event: Event
    user_id: int
    notification: NotificationStatus = NotificationStatus.SENT
    warnings: tuple[str, ...] = field(default=())
