"""Persistence adapter for the ``songs`` table."""

import logging
from typing import List, Optional

from django.db import DatabaseError
from django.db.models import Q

from .exceptions import NotFoundError, StorageError
from .models import Song

SONG_COLUMNS = ("id", "group_name", "song_name", "release_date", "text", "link")
MUTABLE_COLUMNS = SONG_COLUMNS[1:]

# LIMIT/OFFSET are bound as 64-bit integers
MIN_INT64 = -(2 ** 63)
MAX_INT64 = 2 ** 63 - 1


def _decode(row) -> Song:
    values = dict(zip(SONG_COLUMNS, row))
    if not isinstance(values["id"], int):
        raise TypeError(f"id is {type(values['id']).__name__}, expected int")
    for col in MUTABLE_COLUMNS:
        if not isinstance(values[col], str):
            raise TypeError(f"{col} is {type(values[col]).__name__}, expected str")
    return Song(**values)


class SongRepository:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = logger or logging.getLogger(__name__)

    def insert(self, song: Song) -> Song:
        """Writes a new row; the store assigns ``id``."""
        self.log.info("Adding song: %s - %s", song.group_name, song.song_name)
        created = Song(**{col: getattr(song, col) for col in MUTABLE_COLUMNS})
        try:
            created.save(force_insert=True)
        except DatabaseError as exc:
            self.log.error("Failed to add song %s - %s: %s", song.group_name, song.song_name, exc)
            raise StorageError("Failed to add song") from exc

        self.log.info("Successfully added song %d: %s - %s", created.pk, created.group_name, created.song_name)
        return created

    def get_by_id(self, song_id: int) -> Song:
        self.log.debug("Fetching song with ID: %d", song_id)
        try:
            row = Song.objects.filter(pk=song_id).values_list(*SONG_COLUMNS).first()
        except DatabaseError as exc:
            self.log.error("Failed to get song with ID %d: %s", song_id, exc)
            raise StorageError("Failed to fetch song") from exc

        if row is None:
            self.log.info("Song with ID %d not found", song_id)
            raise NotFoundError("Song not found")
        try:
            song = _decode(row)
        except TypeError as exc:
            self.log.error("Failed to decode song with ID %d: %s", song_id, exc)
            raise StorageError("Failed to fetch song") from exc

        self.log.info("Successfully fetched song: %s - %s", song.group_name, song.song_name)
        return song

    def delete_by_id(self, song_id: int) -> int:
        """Deletes the row if present. Returns the number of rows removed."""
        self.log.info("Deleting song with ID: %d", song_id)
        try:
            deleted, _ = Song.objects.filter(pk=song_id).delete()
        except DatabaseError as exc:
            self.log.error("Failed to delete song with ID %d: %s", song_id, exc)
            raise StorageError("Failed to delete song") from exc

        self.log.info("Deleted %d song(s) with ID: %d", deleted, song_id)
        return deleted

    def update_by_id(self, song_id: int, song: Song) -> None:
        """Overwrites every column except ``id``."""
        self.log.info("Updating song with ID: %d", song_id)
        try:
            updated = Song.objects.filter(pk=song_id).update(
                **{col: getattr(song, col) for col in MUTABLE_COLUMNS}
            )
        except DatabaseError as exc:
            self.log.error("Failed to update song with ID %d: %s", song_id, exc)
            raise StorageError("Failed to update song") from exc

        if updated == 0:
            self.log.info("Song with ID %d not found for update", song_id)
            raise NotFoundError("Song not found")
        self.log.info("Successfully updated song with ID: %d", song_id)

    def list_filtered(self, group: str = "", song: str = "", limit: int = 10, offset: int = 0) -> List[Song]:
        """
        Songs whose group/song names contain the given filters (case-insensitive,
        ANDed, empty means no restriction), ordered by id, windowed by limit/offset.

        limit/offset are clamped to [0, 2**63 - 1]. Rows that fail to decode are
        logged and skipped.
        """
        self.log.debug("Fetching songs with filter - group: %s, song: %s, limit: %d, offset: %d",
                       group, song, limit, offset)
        limit = min(max(limit, 0), MAX_INT64)
        offset = min(max(offset, 0), MAX_INT64)
        if limit == 0:
            return []

        predicates = Q()
        if group:
            predicates &= Q(group_name__icontains=group)
        if song:
            predicates &= Q(song_name__icontains=song)

        try:
            qs = Song.objects.filter(predicates).order_by("id").values_list(*SONG_COLUMNS)
            rows = list(qs[offset:offset + limit])
        except DatabaseError as exc:
            self.log.error("Failed to fetch songs: %s", exc)
            raise StorageError("Failed to fetch songs") from exc

        songs = []
        for row in rows:
            try:
                songs.append(_decode(row))
            except TypeError as exc:
                self.log.warning("Skipping song row %r: %s", row[0], exc)
        self.log.info("Successfully fetched %d songs", len(songs))
        return songs
