import pytest
from django.db import DatabaseError

from songs.exceptions import NotFoundError, StorageError
from songs.models import Song
from songs.repository import SongRepository


@pytest.fixture
def repo():
    return SongRepository()


@pytest.fixture
def catalog(make_song):
    """Nine songs: five ABBA, two Abba Teens, two others; ids ascending."""
    songs = [make_song("ABBA", f"Track {i}") for i in range(5)]
    songs += [make_song("Abba Teens", "Mamma Mia"), make_song("A*Teens", "Dancing Queen")]
    songs += [make_song("Muse", "Uprising"), make_song("The Beatles", "Mamma Mia Blues")]
    return songs


@pytest.mark.django_db
def test_insert_assigns_id_and_ignores_caller_id(repo):
    created = repo.insert(Song(id=777, group_name="Muse", song_name="Hysteria",
                               release_date="2003", text="t", link="l"))

    assert created.pk and created.pk > 0
    assert created.pk != 777
    stored = Song.objects.get(pk=created.pk)
    assert (stored.group_name, stored.song_name, stored.release_date) == ("Muse", "Hysteria", "2003")


@pytest.mark.django_db
def test_get_by_id_missing_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        repo.get_by_id(99999)


@pytest.mark.django_db
def test_get_by_id_undecodable_row_is_storage_error(repo, make_song):
    song = make_song(release_date=None)
    with pytest.raises(StorageError):
        repo.get_by_id(song.pk)


@pytest.mark.django_db
def test_delete_is_idempotent(repo, make_song):
    song = make_song()

    assert repo.delete_by_id(song.pk) == 1
    assert repo.delete_by_id(song.pk) == 0
    assert repo.delete_by_id(99999) == 0
    assert not Song.objects.filter(pk=song.pk).exists()


@pytest.mark.django_db
def test_update_replaces_all_fields_but_id(repo, make_song):
    song = make_song()

    repo.update_by_id(song.pk, Song(group_name="Muse", song_name="Starlight",
                                    release_date="2006-09-04", text="new", link="https://new"))

    fetched = repo.get_by_id(song.pk)
    assert fetched.pk == song.pk
    assert (fetched.song_name, fetched.release_date, fetched.text, fetched.link) == (
        "Starlight", "2006-09-04", "new", "https://new")


@pytest.mark.django_db
def test_update_missing_id_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        repo.update_by_id(99999, Song(group_name="g", song_name="s", release_date="", text="", link=""))


@pytest.mark.django_db
def test_list_filters_group_case_insensitively(repo, catalog):
    songs = repo.list_filtered(group="abba", limit=100)

    assert len(songs) == 6
    assert all("abba" in s.group_name.lower() for s in songs)


@pytest.mark.django_db
def test_list_filters_are_anded(repo, catalog):
    songs = repo.list_filtered(group="abba", song="mamma", limit=100)

    assert [(s.group_name, s.song_name) for s in songs] == [("Abba Teens", "Mamma Mia")]


@pytest.mark.django_db
def test_list_pages_do_not_overlap(repo, catalog):
    first = repo.list_filtered(group="abba", limit=5, offset=0)
    second = repo.list_filtered(group="abba", limit=5, offset=5)

    assert len(first) == 5
    assert len(second) == 1
    assert not {s.pk for s in first} & {s.pk for s in second}
    ids = [s.pk for s in first + second]
    assert ids == sorted(ids)


@pytest.mark.django_db
def test_list_without_filters_is_ordered_by_id(repo, catalog):
    songs = repo.list_filtered(limit=100)
    assert [s.pk for s in songs] == [s.pk for s in catalog]


@pytest.mark.django_db
@pytest.mark.parametrize("limit,offset,expected", [(0, 0, 0), (-3, 0, 0), (3, -2, 3)])
def test_list_clamps_negative_window(repo, catalog, limit, offset, expected):
    songs = repo.list_filtered(limit=limit, offset=offset)

    assert len(songs) == expected
    if expected:
        assert songs[0].pk == catalog[0].pk


@pytest.mark.django_db
def test_list_skips_undecodable_rows(repo, make_song, caplog):
    good = make_song(song_name="Good")
    bad = make_song(song_name="Bad", text=None)
    other = make_song(song_name="Also good")

    songs = repo.list_filtered(group="muse", limit=10)

    assert [s.pk for s in songs] == [good.pk, other.pk]
    assert f"Skipping song row {bad.pk}" in caplog.text


@pytest.mark.django_db
def test_database_failure_raises_storage_error(repo, monkeypatch):
    def _boom(*args, **kwargs):
        raise DatabaseError("connection reset")

    monkeypatch.setattr(Song.objects, "filter", _boom)

    with pytest.raises(StorageError) as excinfo:
        repo.delete_by_id(1)
    assert excinfo.value.detail == "Failed to delete song"

    with pytest.raises(StorageError) as excinfo:
        repo.update_by_id(1, Song(group_name="g", song_name="s", release_date="", text="", link=""))
    assert excinfo.value.detail == "Failed to update song"

    with pytest.raises(StorageError) as excinfo:
        repo.get_by_id(1)
    assert excinfo.value.detail == "Failed to fetch song"

    with pytest.raises(StorageError) as excinfo:
        repo.list_filtered(group="muse", limit=5)
    assert excinfo.value.detail == "Failed to fetch songs"


@pytest.mark.django_db
def test_list_clamps_window_to_64_bit_range(repo, catalog):
    songs = repo.list_filtered(limit=10 ** 30, offset=-(10 ** 30))

    assert [s.pk for s in songs] == [s.pk for s in catalog]
