from typing import Any

from arclead.fs import Bucket, layout
from arclead.log import get_logger

_log = get_logger(__name__)


def empty_filmography() -> dict[str, list[Any]]:
    return {"dramas": [], "movies": [], "commercials": []}


def read_filmography(bucket: Bucket, artist_id: str) -> dict[str, Any] | None:
    return bucket.read_json(layout.filmography_key(artist_id))


def get_filmography(bucket: Bucket, artist_id: str) -> dict[str, Any]:
    filmography = read_filmography(bucket, artist_id)
    if filmography is None:
        _log.debug(f"No filmography stored for {artist_id}")
        return empty_filmography()
    return filmography


def write_filmography(bucket: Bucket, artist_id: str, filmography: dict[str, Any]):
    """Replace the artist's filmography document. There is no merging."""
    bucket.write_json(layout.filmography_key(artist_id), filmography)


def delete_filmography(bucket: Bucket, artist_id: str):
    bucket.delete(layout.filmography_key(artist_id))
