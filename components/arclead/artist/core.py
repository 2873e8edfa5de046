"""
The artist collection.

Every artist lives in one ordered list document. Each mutation reads the
whole list, edits it in memory and writes the whole list back, so two
concurrent writers race and the last one wins.
"""

from datetime import datetime, timezone
from typing import Any
import uuid

from arclead.filmography import delete_filmography, read_filmography, write_filmography
from arclead.fs import Bucket, layout
from arclead.log import get_logger
from arclead.photo import main_photo_url

_log = get_logger(__name__)

# Fields a client can't overwrite through an update
_PROTECTED_FIELDS = ("id", "createdAt")


def new_artist_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def load_artists(bucket: Bucket) -> list[dict[str, Any]]:
    artists = bucket.read_json(layout.ARTISTS_KEY)
    return artists if artists else []


def save_artists(bucket: Bucket, artists: list[dict[str, Any]]):
    bucket.write_json(layout.ARTISTS_KEY, artists)


def list_artists(bucket: Bucket) -> list[dict[str, Any]]:
    artists = load_artists(bucket)

    for artist in artists:
        url = main_photo_url(bucket, artist["id"])
        if url:
            artist["mainPhoto"] = url

    return artists


def create_artist(
    bucket: Bucket, name: str, filmography: dict[str, Any] | None = None
) -> str:
    artist_id = new_artist_id()
    now = utcnow()

    new_artist = {
        "id": artist_id,
        "name": name,
        "createdAt": now,
        "updatedAt": now,
    }

    # Built from the listing, main photo URLs included
    artists = list_artists(bucket)
    artists.append(new_artist)
    save_artists(bucket, artists)

    if filmography is not None:
        write_filmography(bucket, artist_id, filmography)

    _log.info(f"Created artist {artist_id} ({name})")
    return artist_id


def get_artist(bucket: Bucket, artist_id: str) -> dict[str, Any] | None:
    artist = next((a for a in load_artists(bucket) if a.get("id") == artist_id), None)
    if artist is None:
        return None

    filmography = read_filmography(bucket, artist_id)
    if filmography is not None:
        artist["filmography"] = filmography

    url = main_photo_url(bucket, artist_id)
    if url:
        artist["mainPhoto"] = url

    return artist


def update_artist(bucket: Bucket, artist_id: str, updates: dict[str, Any]) -> bool:
    """Shallow-merge ``updates`` over the stored record. False if it doesn't exist."""
    artists = load_artists(bucket)

    index = next(
        (i for i, artist in enumerate(artists) if artist.get("id") == artist_id), None
    )
    if index is None:
        return False

    changes = {k: v for k, v in updates.items() if k not in _PROTECTED_FIELDS}
    artists[index] = {**artists[index], **changes, "updatedAt": utcnow()}
    save_artists(bucket, artists)

    if updates.get("filmography") is not None:
        write_filmography(bucket, artist_id, updates["filmography"])

    _log.info(f"Updated artist {artist_id}: {sorted(changes)}")
    return True


def delete_artist(bucket: Bucket, artist_id: str):
    """
    Remove the artist from the collection, then clean up its filmography and
    photos. Cleanup is best effort: failures are logged, not raised.
    """
    artists = load_artists(bucket)
    save_artists(bucket, [a for a in artists if a.get("id") != artist_id])

    try:
        delete_filmography(bucket, artist_id)
    except Exception as e:
        _log.warning(f"Filmography deletion for {artist_id} failed: {e}")

    try:
        for key in bucket.list_keys(layout.artist_prefix(artist_id)):
            bucket.delete(key)
    except Exception as e:
        _log.warning(f"Photo deletion for {artist_id} failed: {e}")

    _log.info(f"Deleted artist {artist_id}")
