"""Mapping of domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TICKET_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_CLOSED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_EVENT_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_TICKET_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_ADJUSTMENT: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_HAS_SALES: status.HTTP_409_CONFLICT,
    ErrorCode.NO_INVENTORY: status.HTTP_409_CONFLICT,
    ErrorCode.SOLD_OUT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_PURCHASE: status.HTTP_409_CONFLICT,
    ErrorCode.RESERVATION_CONFLICT: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.CODE_GENERATION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    """Build the response for a domain error without leaking internals."""
    status_code = STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.warning("Request failed with %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status_code,
    )
