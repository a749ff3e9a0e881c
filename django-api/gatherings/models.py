"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField()
    date = models.DateTimeField()
    location = models.CharField(max_length=255)
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="organized_events",
    )
    trending = models.BooleanField(default=False)
    photo = models.URLField(max_length=500, blank=True, null=True)
    ticket_limit = models.PositiveIntegerField()
    tickets_sold = models.PositiveIntegerField(default=0)
    attendees = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="Attendance",
        related_name="attended_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
            models.Index(fields=["trending"], name="event_trending_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(ticket_limit__gte=1),
                name="event_ticket_limit_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(tickets_sold__lte=models.F("ticket_limit")),
                name="event_tickets_sold_within_limit",
            ),
        ]

    def __str__(self) -> str:
        return self.title


class Attendance(models.Model):
    """Persistence model for a user's RSVP to an event."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="attendances")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="attendances",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_event_attendance"),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.event}"
