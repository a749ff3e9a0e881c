"""Email dispatcher backed by Django's mail framework.

Transport settings (EMAIL_HOST, EMAIL_PORT, ...) come from Django settings.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail

from gatherings.domain.errors import NotificationFailedError
from gatherings.notifications.interfaces import NotificationDispatcher

logger = logging.getLogger(__name__)


class DjangoMailDispatcher(NotificationDispatcher):
    """Sends confirmations through the configured EMAIL_BACKEND."""

    def __init__(self, from_address: str | None = None) -> None:
        self._from_address = from_address or settings.DEFAULT_FROM_EMAIL

    def send(self, to_address: str, subject: str, body: str) -> None:
        if not to_address:
            raise NotificationFailedError(to_address, reason="recipient has no email address")
        try:
            send_mail(subject, body, self._from_address, [to_address], fail_silently=False)
        except (OSError, ValueError) as exc:
            raise NotificationFailedError(to_address, reason=str(exc)) from exc
        logger.debug("Sent %r to %s", subject, to_address)
