"""Confirmation email composition."""

from django.utils import formats, timezone

from gatherings.domain import Caller, Event, Quantity
from gatherings.notifications.interfaces import Message

PURCHASE_SUBJECT = "Ticket Purchase Confirmation"
RSVP_SUBJECT = "RSVP Confirmation"

PURCHASE_TEMPLATE = """Dear {name},

Thank you for purchasing {quantity} ticket(s) for the event "{title}".

Event Details:
---------------
Title: {title}
Description: {description}
Date: {date}
Location: {location}

Your Ticket Information:
-------------------------
Quantity: {quantity}

We appreciate your support and look forward to seeing you at the event.

{signature}
"""

RSVP_TEMPLATE = """Dear {name},

Your RSVP for "{title}" is confirmed.

Date: {date}
Location: {location}

{signature}
"""


def _format_date(event: Event) -> str:
    return formats.date_format(timezone.localtime(event.date), "DATETIME_FORMAT")


def purchase_confirmation(caller: Caller, event: Event, quantity: Quantity, signature: str) -> Message:
    body = PURCHASE_TEMPLATE.format(
        name=caller.name or "attendee",
        quantity=quantity.value,
        title=event.title,
        description=event.description,
        date=_format_date(event),
        location=event.location,
        signature=signature,
    )
    return Message(to_address=caller.email, subject=PURCHASE_SUBJECT, body=body)


def rsvp_confirmation(caller: Caller, event: Event, signature: str) -> Message:
    body = RSVP_TEMPLATE.format(
        name=caller.name or "attendee",
        title=event.title,
        date=_format_date(event),
        location=event.location,
        signature=signature,
    )
    return Message(to_address=caller.email, subject=RSVP_SUBJECT, body=body)
