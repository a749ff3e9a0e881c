"""RSVP service.

An RSVP is an "add to set if absent" in the store, so a double submit from
the same user can register them at most once.
"""

import logging

from gatherings.domain import Caller, NotificationStatus, RsvpConfirmation
from gatherings.domain.errors import AlreadyRsvpedError, ErrorCode, EventNotFoundError
from gatherings.notifications.messages import rsvp_confirmation
from gatherings.services.confirmation import ConfirmationSender
from gatherings.services.event_service import parse_event_id
from gatherings.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class RsvpService:
    """Service for event RSVPs."""

    def __init__(
        self,
        store: EventStore,
        confirmations: ConfirmationSender,
        signature: str = "",
    ) -> None:
        self._store = store
        self._confirmations = confirmations
        self._signature = signature

    def rsvp(self, event_id: str, caller: Caller) -> RsvpConfirmation:
        """Register ``caller`` as an attendee of an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            AlreadyRsvpedError: If the caller already attends the event.
        """
        parsed_id = parse_event_id(event_id)

        event = self._store.add_attendee(parsed_id, caller.user_id)
        if event is None:
            if self._store.get_event(parsed_id) is None:
                raise EventNotFoundError(event_id)
            raise AlreadyRsvpedError(event_id, caller.user_id)

        logger.info("User %s RSVPed to event %s", caller.user_id, parsed_id)
        status = self._confirmations.send(rsvp_confirmation(caller, event, self._signature))
        warnings = (ErrorCode.NOTIFICATION_FAILED.value,) if status is NotificationStatus.FAILED else ()
        return RsvpConfirmation(
            event=event,
            user_id=caller.user_id,
            notification=status,
            warnings=warnings,
        )
