"""
Client for the external song details lookup.

    GET {base_url}?group=<group name>&song=<song name>
    -> 200 {"releaseDate": "...", "text": "...", "link": "..."}
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .exceptions import DecodeError, TransportError, UpstreamError

DETAIL_FIELDS = {"release_date": "releaseDate", "text": "text", "link": "link"}


@dataclass(frozen=True)
class SongDetail:
    release_date: str = ""
    text: str = ""
    link: str = ""


class SongDetailsClient:
    def __init__(self, base_url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None,
                 logger: Optional[logging.Logger] = None):
        self.base_url = base_url
        self.timeout = timeout
        # None: one-shot requests.get, which closes its own pool
        self.session = session
        self.log = logger or logging.getLogger(__name__)

    def fetch_details(self, group_name: str, song_name: str) -> SongDetail:
        """Looks up release date, text and link for one song. Never retries."""
        self.log.info("Fetching song details for group: %s, song: %s", group_name, song_name)
        try:
            http = self.session if self.session is not None else requests
            resp = http.get(
                self.base_url,
                params={"group": group_name, "song": song_name},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.log.error("Song details request failed for %s - %s: %s", group_name, song_name, exc)
            raise TransportError(f"song details request failed: {exc}") from exc

        if resp.status_code != 200:
            self.log.error("Song details lookup for %s - %s returned status %d",
                           group_name, song_name, resp.status_code)
            raise UpstreamError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            self.log.error("Song details for %s - %s are not valid JSON: %s", group_name, song_name, exc)
            raise DecodeError("song details body is not valid JSON") from exc

        return self._decode(data, group_name, song_name)

    def _decode(self, data, group_name: str, song_name: str) -> SongDetail:
        if not isinstance(data, dict):
            self.log.error("Song details for %s - %s are not a JSON object", group_name, song_name)
            raise DecodeError("song details body is not a JSON object")

        values = {}
        for attr, key in DETAIL_FIELDS.items():
            # absent keys decode to the zero value
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                self.log.error("Song details field %r for %s - %s is not a string", key, group_name, song_name)
                raise DecodeError(f"song details field {key!r} is not a string")
            values[attr] = value
        return SongDetail(**values)
