"""Builders and fakes shared by the unit tests."""

import uuid
from datetime import UTC, datetime, timedelta

from gatherings.domain import Event, EventId, TicketInventory, UserRef
from gatherings.domain.errors import NotificationFailedError
from gatherings.notifications import NotificationDispatcher

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=UTC)

ORGANIZER = UserRef(id=1, name="Organizer")
MEMBER = UserRef(id=2, name="Member")


class RecordingDispatcher(NotificationDispatcher):
    """Keeps sent messages; fails every send when ``fail`` is set."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[str, str, str]] = []

    def send(self, to_address: str, subject: str, body: str) -> None:
        if self.fail:
            raise NotificationFailedError(to_address, reason="mail server unavailable")
        self.sent.append((to_address, subject, body))


def make_event(
    *,
    title: str = "Community Iftar",
    description: str = "Evening gathering",
    date: datetime = NOW + timedelta(days=7),
    trending: bool = False,
    limit: int = 10,
    sold: int = 0,
) -> Event:
    return Event(
        id=EventId(value=uuid.uuid4()),
        title=title,
        subtitle="",
        description=description,
        date=date,
        location="Main Hall",
        organizer=ORGANIZER,
        trending=trending,
        photo=None,
        tickets=TicketInventory(limit=limit, sold=sold),
        created_at=NOW,
        updated_at=NOW,
    )
