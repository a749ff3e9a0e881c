"""Ticket inventory service.

Selling tickets is a single conditional increment in the store: the sold
count grows by the requested quantity only if it stays within the limit.
The event is never loaded, compared and saved back.
"""

import logging

from gatherings.domain import Caller, NotificationStatus, Quantity, Receipt
from gatherings.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    InsufficientInventoryError,
    InvalidInputError,
)
from gatherings.notifications.messages import purchase_confirmation
from gatherings.services.confirmation import ConfirmationSender
from gatherings.services.event_service import parse_event_id
from gatherings.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_quantity(quantity: int) -> Quantity:
    try:
        return Quantity(value=quantity)
    except ValueError as exc:
        raise InvalidInputError(
            message="Quantity must be a positive integer",
            details={"quantity": [str(exc)]},
        ) from exc


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        store: EventStore,
        confirmations: ConfirmationSender,
        signature: str = "",
    ) -> None:
        self._store = store
        self._confirmations = confirmations
        self._signature = signature

    def purchase(self, event_id: str, caller: Caller, quantity: int) -> Receipt:
        """Sell ``quantity`` tickets of an event to ``caller``.

        Raises:
            InvalidInputError: If quantity is not a positive integer.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InsufficientInventoryError: If fewer than ``quantity`` tickets remain.
        """
        requested = parse_quantity(quantity)
        parsed_id = parse_event_id(event_id)

        event = self._store.increment_tickets_sold(parsed_id, requested)
        if event is None:
            current = self._store.get_event(parsed_id)
            if current is None:
                raise EventNotFoundError(event_id)
            logger.info(
                "Rejected purchase of %d ticket(s) for event %s: %d available",
                requested.value,
                parsed_id,
                current.tickets.available,
            )
            raise InsufficientInventoryError(
                event_id, requested=requested.value, available=current.tickets.available
            )

        logger.info(
            "User %s bought %d ticket(s) for event %s (%d/%d sold)",
            caller.user_id,
            requested.value,
            parsed_id,
            event.tickets.sold,
            event.tickets.limit,
        )
        status = self._confirmations.send(
            purchase_confirmation(caller, event, requested, self._signature)
        )
        warnings = (ErrorCode.NOTIFICATION_FAILED.value,) if status is NotificationStatus.FAILED else ()
        return Receipt(
            event=event,
            quantity=requested,
            user_id=caller.user_id,
            notification=status,
            warnings=warnings,
        )

    def tickets_sold(self, event_id: str) -> int:
        """Return the number of tickets sold for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event.tickets.sold
