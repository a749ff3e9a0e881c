"""Serializers for parsing API input and rendering domain models."""

from rest_framework import serializers

from gatherings.domain import EventDraft, EventPatch
from gatherings.domain.value_objects import MAX_TICKETS


class UserRefSerializer(serializers.Serializer):
    """Serializer for UserRef domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()


class TicketInventorySerializer(serializers.Serializer):
    """Serializer for TicketInventory value object."""

    limit = serializers.IntegerField()
    sold = serializers.IntegerField()
    available = serializers.IntegerField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    subtitle = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    organizer = UserRefSerializer()
    trending = serializers.BooleanField()
    photo = serializers.CharField(allow_null=True)
    tickets = TicketInventorySerializer()
    attendees = UserRefSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ReceiptSerializer(serializers.Serializer):
    """Serializer for Receipt domain model."""

    event = EventSerializer()
    quantity = serializers.IntegerField(source="quantity.value")
    user_id = serializers.IntegerField()
    notification = serializers.CharField(source="notification.value")
    warnings = serializers.ListField(child=serializers.CharField())


class RsvpConfirmationSerializer(serializers.Serializer):
    """Serializer for RsvpConfirmation domain model."""

    event = EventSerializer()
    user_id = serializers.IntegerField()
    notification = serializers.CharField(source="notification.value")
    warnings = serializers.ListField(child=serializers.CharField())


class EventCreateSerializer(serializers.Serializer):
    """Input for POST /api/events."""

    title = serializers.CharField(max_length=255)
    subtitle = serializers.CharField(max_length=255, allow_blank=True, default="")
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField(max_length=255)
    trending = serializers.BooleanField(default=False)
    photo = serializers.URLField(max_length=500, allow_null=True, default=None)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_TICKETS)

    def to_draft(self) -> EventDraft:
        return EventDraft(**self.validated_data)


class EventUpdateSerializer(serializers.Serializer):
    """Input for PUT/PATCH /api/events/{event_id}; every field is optional."""

    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    subtitle = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    date = serializers.DateTimeField(required=False, allow_null=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    trending = serializers.BooleanField(required=False)
    photo = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)

    def to_patch(self) -> EventPatch:
        return EventPatch(**self.validated_data)


class TicketPurchaseSerializer(serializers.Serializer):
    """Input for POST /api/events/{event_id}/tickets."""

    quantity = serializers.IntegerField(min_value=1, max_value=MAX_TICKETS)
