# tests/conftest.py
import json

import pytest
import requests

from songs.models import Song


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        self._raw = raw if raw is not None else json.dumps(body if body is not None else {})

    def json(self):
        return json.loads(self._raw)


class FakeSession:
    """Stands in for requests.Session; records every GET it receives."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_details():
    return {
        "releaseDate": "16.07.2006",
        "text": "Ooh baby, don't you know I suffer?",
        "link": "https://www.youtube.com/watch?v=Xsp3_a-PMTw",
    }


@pytest.fixture
def stub_details_session(monkeypatch, settings):
    """
    Usage:
      session = stub_details_session(FakeResponse(200, {...}))
      session = stub_details_session(error=requests.ConnectionError("down"))
    Routes the views' details client through a FakeSession.
    """
    settings.SONG_DETAILS_API_URL = "http://details.test/info"

    def _set(response=None, error=None):
        from songs import views
        from songs.song_details import SongDetailsClient

        session = FakeSession(response=response, error=error)
        monkeypatch.setattr(
            views,
            "get_details_client",
            lambda: SongDetailsClient(settings.SONG_DETAILS_API_URL, timeout=2.0, session=session),
            raising=True,
        )
        return session
    return _set


@pytest.fixture
def make_song():
    def _make(group_name="Muse", song_name="Supermassive Black Hole", **extra):
        fields = {"release_date": "16.07.2006", "text": "lyrics", "link": "https://example.com"}
        fields.update(extra)
        return Song.objects.create(group_name=group_name, song_name=song_name, **fields)
    return _make


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
