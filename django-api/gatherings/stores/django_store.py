"""Django ORM implementation of the EventStore.

Inventory and attendee writes are conditional statements evaluated by the
database, so concurrent requests never read-modify-write the same row.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import F, Prefetch, Q, QuerySet
from django.utils import timezone

from gatherings import models
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

logger = logging.getLogger(__name__)


def to_user_ref(user) -> UserRef:
    return UserRef(id=user.pk, name=user.get_full_name() or user.get_username())


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _queryset(self) -> QuerySet:
        return models.Event.objects.select_related("organizer").prefetch_related(
            Prefetch(
                "attendances",
                queryset=models.Attendance.objects.select_related("user"),
            )
        )

    def _to_domain(self, row: models.Event) -> Event:
        return Event(
            id=EventId(value=row.id),
            title=row.title,
            subtitle=row.subtitle,
            description=row.description,
            date=row.date,
            location=row.location,
            organizer=to_user_ref(row.organizer),
            trending=row.trending,
            photo=row.photo,
            tickets=TicketInventory(limit=row.ticket_limit, sold=row.tickets_sold),
            attendees=tuple(to_user_ref(attendance.user) for attendance in row.attendances.all()),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def list_events(self) -> list[Event]:
        return [self._to_domain(row) for row in self._queryset()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        return self._to_domain(row) if row is not None else None

    def find_events(self, criteria: EventCriteria) -> list[Event]:
        condition = Q()
        if criteria.date_after is not None:
            condition &= Q(date__gt=criteria.date_after)
        if criteria.date_on_or_before is not None:
            condition &= Q(date__lte=criteria.date_on_or_before)
        if criteria.trending is not None:
            condition &= Q(trending=criteria.trending)
        return [self._to_domain(row) for row in self._queryset().filter(condition)]

    def create_event(self, draft: EventDraft, organizer_id: int) -> Event:
        row = models.Event.objects.create(
            title=draft.title,
            subtitle=draft.subtitle,
            description=draft.description,
            date=draft.date,
            location=draft.location,
            organizer_id=organizer_id,
            trending=draft.trending,
            photo=draft.photo,
            ticket_limit=draft.limit,
        )
        return self.get_event(EventId(value=row.id))

    def update_event(self, event_id: EventId, patch: EventPatch) -> Event | None:
        updated = models.Event.objects.filter(pk=event_id.value).update(
            updated_at=timezone.now(), **patch.changes()
        )
        if not updated:
            return None
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def increment_tickets_sold(self, event_id: EventId, quantity: Quantity) -> Event | None:
        updated = models.Event.objects.filter(
            pk=event_id.value,
            tickets_sold__lte=F("ticket_limit") - quantity.value,
        ).update(
            tickets_sold=F("tickets_sold") + quantity.value,
            updated_at=timezone.now(),
        )
        if not updated:
            logger.info("Conditional ticket increment matched no event %s", event_id)
            return None
        return self.get_event(event_id)

    def add_attendee(self, event_id: EventId, user_id: int) -> Event | None:
        if not models.Event.objects.filter(pk=event_id.value).exists():
            return None
        try:
            with transaction.atomic():
                models.Attendance.objects.create(event_id=event_id.value, user_id=user_id)
        except IntegrityError:
            logger.info("Attendance for user %s on event %s already exists", user_id, event_id)
            return None
        return self.get_event(event_id)

    def get_user(self, user_id: int) -> UserRef | None:
        user = get_user_model().objects.filter(pk=user_id).first()
        return to_user_ref(user) if user is not None else None
