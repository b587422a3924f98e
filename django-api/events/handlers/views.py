"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsPromoter
from events import cache as event_cache
from events.domain import EventChanges, Money, UserId
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.serializers import (
    EventInputSerializer,
    EventListQuerySerializer,
    EventPageSerializer,
    EventSerializer,
)
from events.services import get_event_service, parse_event_id


class EventListView(APIView):
    """Handler for GET /api/events and POST /api/events"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsPromoter()]

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = query.validated_data["page"]
        limit = query.validated_data["limit"]
        search = query.validated_data.get("search") or None

        key = event_cache.list_key(page, limit, search)
        payload = cache.get(key)
        if payload is None:
            result = get_event_service().list_events(page=page, limit=limit, search=search)
            payload = EventPageSerializer(result).data
            cache.set(key, payload, timeout=event_cache.timeout())
        return Response(payload)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        event = get_event_service().create_event(
            UserId(request.user.id),
            name=data["name"],
            description=data["description"],
            starts_at=data["starts_at"],
            location=data["location"],
            image_url=data["image_url"],
            price=Money(data["price"]),
            total=data["total"],
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class PromoterEventListView(APIView):
    """Handler for GET /api/events/mine"""

    permission_classes = [IsPromoter]

    def get(self, request: Request) -> Response:
        events = get_event_service().list_promoter_events(UserId(request.user.id))
        return Response({"data": EventSerializer(events, many=True).data, "total": len(events)})


class EventDetailView(APIView):
    """Handler for GET, PUT, PATCH and DELETE /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsPromoter()]

    def get(self, request: Request, event_id: str) -> Response:
        try:
            parsed = parse_event_id(event_id)
        except DomainError as error:
            return error_response(error)

        key = event_cache.detail_key(parsed.value)
        payload = cache.get(key)
        if payload is None:
            try:
                event = get_event_service().get_event(str(parsed))
            except DomainError as error:
                return error_response(error)
            payload = EventSerializer(event).data
            cache.set(key, payload, timeout=event_cache.timeout())
        return Response(payload)

    def put(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    def patch(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id, UserId(request.user.id))
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        changes = EventChanges(
            name=data.get("name"),
            description=data.get("description"),
            starts_at=data.get("starts_at"),
            location=data.get("location"),
            image_url=data.get("image_url"),
            price=Money(data["price"]) if "price" in data else None,
            total=data.get("total"),
        )
        try:
            event = get_event_service().update_event(event_id, UserId(request.user.id), changes)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)
