from gatherings.domain.models import (
    Caller,
    Event,
    EventCriteria,
    EventDraft,
    EventPatch,
    NotificationStatus,
    Receipt,
    RsvpConfirmation,
    UserRef,
)
from gatherings.domain.value_objects import EventId, Quantity, TicketInventory

__all__ = [
    "Caller",
    "Event",
    "EventCriteria",
    "EventDraft",
    "EventPatch",
    "NotificationStatus",
    "Receipt",
    "RsvpConfirmation",
    "UserRef",
    "EventId",
    "Quantity",
    "TicketInventory",
]
