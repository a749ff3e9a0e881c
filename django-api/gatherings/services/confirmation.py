"""Best-effort delivery of confirmation messages.

Confirmations are sent only after the change they confirm has been
committed, and their outcome never changes that change.
"""

import logging
from concurrent.futures import Executor, Future

from gatherings.domain import NotificationStatus
from gatherings.domain.errors import NotificationFailedError
from gatherings.notifications import Message, NotificationDispatcher

logger = logging.getLogger(__name__)


class ConfirmationSender:
    """Sends confirmations inline, or on an executor when one is given."""

    def __init__(self, dispatcher: NotificationDispatcher, executor: Executor | None = None) -> None:
        self._dispatcher = dispatcher
        self._executor = executor

    def send(self, message: Message) -> NotificationStatus:
        if self._executor is None:
            return self._deliver(message)
        future = self._executor.submit(self._deliver, message)
        future.add_done_callback(_log_unexpected_failure)
        return NotificationStatus.DEFERRED

    def _deliver(self, message: Message) -> NotificationStatus:
        try:
            self._dispatcher.deliver(message)
        except NotificationFailedError as exc:
            logger.warning(
                "Confirmation %r to %s failed: %s",
                message.subject,
                message.to_address,
                exc.reason or exc.message,
            )
            return NotificationStatus.FAILED
        except Exception:
            logger.exception("Confirmation %r to %s crashed", message.subject, message.to_address)
            return NotificationStatus.FAILED
        return NotificationStatus.SENT


def _log_unexpected_failure(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("Confirmation delivery crashed", exc_info=exc)
