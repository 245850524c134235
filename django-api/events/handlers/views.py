"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode, InvalidPayloadError
from events.handlers.serializers import EventPatchSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    logger.warning("Request rejected: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_ERROR_CODE[error.code],
    )


class EventListView(APIView):
    """Handler for GET /api/events/"""

    def get(self, request: Request) -> Response:
        events = get_event_service().get_filtered_events()
        return Response(EventSerializer(events, many=True).data)


class EventSearchView(APIView):
    """Handler for GET /api/events/search/{query}"""

    def get(self, request: Request, query: str) -> Response:
        events = get_event_service().get_filtered_events(query)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for PUT and DELETE /api/events/{event_id}"""

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventPatchSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(InvalidPayloadError())

        try:
            event = get_event_service().update_event(event_id, serializer.to_patch())
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_200_OK)
