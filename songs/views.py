import logging
import re

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ValidationError
from .models import Song
from .repository import MAX_INT64, MIN_INT64, SongRepository
from .serializers import SongCreateSerializer, SongSerializer
from .song_details import SongDetailsClient

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

# optional sign, ASCII digits only: no spaces, underscores or other scripts' digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


def get_repository() -> SongRepository:
    return SongRepository()


def get_details_client() -> SongDetailsClient:
    return SongDetailsClient(settings.SONG_DETAILS_API_URL, timeout=settings.SONG_DETAILS_TIMEOUT)


def _parse_int(raw: str):
    """Signed 64-bit integer from ``raw``, or None if it is not one."""
    if not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if not MIN_INT64 <= value <= MAX_INT64:
        return None
    return value


def _parse_song_id(raw: str) -> int:
    song_id = _parse_int(raw)
    if song_id is None:
        logger.info("Invalid song ID: %r", raw)
        raise ValidationError("Invalid song ID")
    return song_id


def _query_int(params, name: str, default: int) -> int:
    # present but not an integer -> 0
    raw = params.get(name)
    if raw is None:
        return default
    value = _parse_int(raw)
    return 0 if value is None else value


class SongListView(APIView):
    """GET: filtered/paginated list. POST: enrich and store a new song."""

    def get(self, request):
        group = request.query_params.get("group", "")
        song = request.query_params.get("song", "")
        limit = _query_int(request.query_params, "limit", DEFAULT_LIMIT)
        offset = _query_int(request.query_params, "offset", DEFAULT_OFFSET)

        songs = get_repository().list_filtered(group, song, limit, offset)
        return Response(SongSerializer(songs, many=True).data)

    def post(self, request):
        serializer = SongCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        group_name = serializer.validated_data["group_name"]
        song_name = serializer.validated_data["song_name"]

        detail = get_details_client().fetch_details(group_name, song_name)
        song = get_repository().insert(
            Song(
                group_name=group_name,
                song_name=song_name,
                release_date=detail.release_date,
                text=detail.text,
                link=detail.link,
            )
        )
        return Response(SongSerializer(song).data, status=status.HTTP_201_CREATED)


class SongDetailView(APIView):
    def get(self, request, song_id):
        song = get_repository().get_by_id(_parse_song_id(song_id))
        return Response(SongSerializer(song).data)

    def put(self, request, song_id):
        pk = _parse_song_id(song_id)
        serializer = SongSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        get_repository().update_by_id(pk, Song(**serializer.validated_data))
        return Response(status=status.HTTP_200_OK)

    def delete(self, request, song_id):
        get_repository().delete_by_id(_parse_song_id(song_id))
        return Response(status=status.HTTP_204_NO_CONTENT)
