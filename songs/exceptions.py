"""
Error taxonomy for the song library and the DRF handler that renders it.

Every failure leaves the API as ``{"error": "<category>"}``; internal
details (driver messages, upstream status lines) only go to the log.
"""

import logging

from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class SongLibraryError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail=None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def public_detail(self) -> str:
        return self.detail


class ValidationError(SongLibraryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class NotFoundError(SongLibraryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Song not found"


class StorageError(SongLibraryError):
    default_detail = "Storage failure"


class EnrichmentError(SongLibraryError):
    """Song details lookup failed. ``detail`` is for logs only."""

    default_detail = "Failed to fetch song data"

    @property
    def public_detail(self) -> str:
        return self.default_detail


class TransportError(EnrichmentError):
    pass


class UpstreamError(EnrichmentError):
    def __init__(self, status_code: int, detail=None):
        self.upstream_status = status_code
        super().__init__(detail or f"song details lookup returned status {status_code}")


class DecodeError(EnrichmentError):
    pass


def song_exception_handler(exc, context):
    if isinstance(exc, SongLibraryError):
        return Response({"error": exc.public_detail}, status=exc.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        logger.info("Rejected request body: %s", exc.detail)
        return Response(
            {"error": ValidationError.default_detail, "details": exc.detail},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, drf_exceptions.ParseError):
        logger.info("Malformed request body: %s", exc.detail)
        return Response({"error": ValidationError.default_detail}, status=status.HTTP_400_BAD_REQUEST)

    # 405, 415, Http404 ... keep DRF's status, reshape the body
    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"error": str(detail or "Request failed")}
    return response
