"""Construction of services from Django settings.

Services are built per request over the Django store; nothing about
events or tickets is cached between requests. The only long-lived object
is the executor used for deferred confirmations.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache

from django.conf import settings

from gatherings.notifications.django_mail import DjangoMailDispatcher
from gatherings.services import ConfirmationSender, EventService, RsvpService, TicketService
from gatherings.stores.django_store import DjangoEventStore

DEFAULTS = {
    "NOTIFICATIONS_BLOCKING": True,
    "NOTIFICATION_WORKERS": 2,
    "EMAIL_SIGNATURE": "The Community Events Team",
}


def app_setting(name: str):
    return getattr(settings, "GATHERINGS", {}).get(name, DEFAULTS[name])


@lru_cache(maxsize=1)
def notification_executor() -> ThreadPoolExecutor:
    return ThreadPoolExecutor(
        max_workers=app_setting("NOTIFICATION_WORKERS"),
        thread_name_prefix="confirmations",
    )


def confirmation_sender() -> ConfirmationSender:
    executor = None if app_setting("NOTIFICATIONS_BLOCKING") else notification_executor()
    return ConfirmationSender(DjangoMailDispatcher(), executor=executor)


def event_service() -> EventService:
    return EventService(DjangoEventStore())


def ticket_service() -> TicketService:
    return TicketService(
        DjangoEventStore(),
        confirmation_sender(),
        signature=app_setting("EMAIL_SIGNATURE"),
    )


def rsvp_service() -> RsvpService:
    return RsvpService(
        DjangoEventStore(),
        confirmation_sender(),
        signature=app_setting("EMAIL_SIGNATURE"),
    )
