from gatherings.handlers.views import (
    EventDetailView,
    EventListView,
    OrganizerDetailView,
    PastEventListView,
    RsvpView,
    TicketPurchaseView,
    TicketsSoldView,
    TrendingEventListView,
    UpcomingEventListView,
)

__all__ = [
    "EventDetailView",
    "EventListView",
    "OrganizerDetailView",
    "PastEventListView",
    "RsvpView",
    "TicketPurchaseView",
    "TicketsSoldView",
    "TrendingEventListView",
    "UpcomingEventListView",
]
