"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from gatherings import wiring
from gatherings.handlers.permissions import IsStaffOrReadOnly, caller_from
from gatherings.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    EventUpdateSerializer,
    ReceiptSerializer,
    RsvpConfirmationSerializer,
    TicketPurchaseSerializer,
    UserRefSerializer,
)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsStaffOrReadOnly]

    def get(self, request: Request) -> Response:
        events = wiring.event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = wiring.event_service().create_event(caller_from(request), serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    permission_classes = [IsStaffOrReadOnly]

    def get(self, request: Request, event_id: str) -> Response:
        event = wiring.event_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = wiring.event_service().update_event(event_id, serializer.to_patch())
        return Response(EventSerializer(event).data)

    put = patch

    def delete(self, request: Request, event_id: str) -> Response:
        wiring.event_service().delete_event(event_id)
        return Response({"message": "Event removed"})


class UpcomingEventListView(APIView):
    """Handler for GET /api/events/upcoming"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response(EventSerializer(wiring.event_service().upcoming(), many=True).data)


class PastEventListView(APIView):
    """Handler for GET /api/events/past"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response(EventSerializer(wiring.event_service().past(), many=True).data)


class TrendingEventListView(APIView):
    """Handler for GET /api/events/trending"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response(EventSerializer(wiring.event_service().trending(), many=True).data)


class OrganizerDetailView(APIView):
    """Handler for GET /api/events/organizers/{user_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, user_id: int) -> Response:
        organizer = wiring.event_service().get_organizer(user_id)
        return Response(UserRefSerializer(organizer).data)


class RsvpView(APIView):
    """Handler for POST /api/events/{event_id}/rsvp"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        confirmation = wiring.rsvp_service().rsvp(event_id, caller_from(request))
        return Response({"message": "RSVP successful", **RsvpConfirmationSerializer(confirmation).data})


class TicketPurchaseView(APIView):
    """Handler for POST /api/events/{event_id}/tickets"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = TicketPurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        receipt = wiring.ticket_service().purchase(
            event_id, caller_from(request), serializer.validated_data["quantity"]
        )
        return Response(ReceiptSerializer(receipt).data)


class TicketsSoldView(APIView):
    """Handler for GET /api/events/{event_id}/tickets-sold"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, event_id: str) -> Response:
        return Response({"tickets_sold": wiring.ticket_service().tickets_sold(event_id)})
