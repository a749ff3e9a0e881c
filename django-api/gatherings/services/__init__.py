from gatherings.services.confirmation import ConfirmationSender
from gatherings.services.event_service import EventService
from gatherings.services.rsvp_service import RsvpService
from gatherings.services.ticket_service import TicketService

__all__ = [
    "ConfirmationSender",
    "EventService",
    "RsvpService",
    "TicketService",
]
