from arclead.artist.core import (
    create_artist,
    delete_artist,
    get_artist,
    list_artists,
    load_artists,
    save_artists,
    update_artist,
)

__all__ = [
    "create_artist",
    "delete_artist",
    "get_artist",
    "list_artists",
    "load_artists",
    "save_artists",
    "update_artist",
]
