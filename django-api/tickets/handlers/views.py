"""HTTP handlers (views) - handle HTTP concerns only."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsBuyer
from events.domain import UserId
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from tickets.handlers.serializers import (
    RedemptionCodeSerializer,
    TicketSerializer,
    TicketViewSerializer,
)
from tickets.services import get_reservation_service, get_ticket_service, get_validation_service


class PurchaseView(APIView):
    """Handler for POST /api/tickets/purchase/{event_id}"""

    permission_classes = [IsBuyer]

    def post(self, request: Request, event_id: str) -> Response:
        try:
            ticket = get_reservation_service().reserve(event_id, UserId(request.user.id))
        except DomainError as error:
            return error_response(error)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class MyTicketListView(APIView):
    """Handler for GET /api/tickets/mine"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        views = get_ticket_service().list_for_buyer(UserId(request.user.id))
        return Response({"data": TicketViewSerializer(views, many=True).data, "total": len(views)})


class TicketValidateView(APIView):
    """Handler for GET /api/tickets/validate/{code}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, code: str) -> Response:
        serializer = RedemptionCodeSerializer(data={"code": code})
        serializer.is_valid(raise_exception=True)
        try:
            view = get_validation_service().lookup(serializer.validated_data["code"])
        except DomainError as error:
            return error_response(error)
        return Response(TicketViewSerializer(view).data)


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, ticket_id: str) -> Response:
        try:
            view = get_ticket_service().get_for_buyer(ticket_id, UserId(request.user.id))
        except DomainError as error:
            return error_response(error)
        return Response(TicketViewSerializer(view).data)
