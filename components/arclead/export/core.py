from enum import StrEnum, auto
from typing import Any

from arclead.artist import load_artists
from arclead.filmography import empty_filmography, read_filmography
from arclead.fs import Bucket
from arclead.log import get_logger
from arclead.photo import main_photo_url

_log = get_logger(__name__)


class ExportKey(StrEnum):
    NAME = auto()
    ID = auto()


def export_artists(
    bucket: Bucket, title_suffix: str, key: ExportKey = ExportKey.NAME
) -> dict[str, dict[str, Any]]:
    """
    Display documents for the public site.

    Keyed by artist name unless ``key`` is ``id``. Two artists sharing a name
    collide in name mode and the later one wins.
    """
    exported: dict[str, dict[str, Any]] = {}

    for artist in load_artists(bucket):
        artist_id = artist["id"]
        name = artist.get("name", "")

        filmography = read_filmography(bucket, artist_id)
        entry: dict[str, Any] = {
            "title": f"{name} - {title_suffix}",
            "filmography": filmography if filmography is not None else empty_filmography(),
            "mainPhoto": main_photo_url(bucket, artist_id),
        }

        if key == ExportKey.ID:
            entry["name"] = name
            exported[artist_id] = entry
            continue

        if name in exported:
            _log.warning(f"Export name collision on '{name}', keeping {artist_id}")
        exported[name] = entry

    _log.debug(f"Exported {len(exported)} artists")
    return exported


def export_filmography(bucket: Bucket) -> dict[str, dict[str, Any]]:
    """Filmography per artist name. Artists without a document are left out."""
    exported: dict[str, dict[str, Any]] = {}

    for artist in load_artists(bucket):
        filmography = read_filmography(bucket, artist["id"])
        if filmography is not None:
            exported[artist.get("name", "")] = filmography

    return exported
