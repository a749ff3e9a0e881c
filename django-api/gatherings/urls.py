from django.urls import path

from gatherings.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventListView.as_view(), name="event-upcoming"),
    path("events/past", PastEventListView.as_view(), name="event-past"),
    path("events/trending", TrendingEventListView.as_view(), name="event-trending"),
    path(
        "events/organizers/<int:user_id>",
        OrganizerDetailView.as_view(),
        name="organizer-detail",
    ),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/rsvp", RsvpView.as_view(), name="event-rsvp"),
    path(
        "events/<str:event_id>/tickets",
        TicketPurchaseView.as_view(),
        name="ticket-purchase",
    ),
    path(
        "events/<str:event_id>/tickets-sold",
        TicketsSoldView.as_view(),
        name="tickets-sold",
    ),
]
