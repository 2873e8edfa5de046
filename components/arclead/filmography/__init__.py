from arclead.filmography.core import (
    delete_filmography,
    empty_filmography,
    get_filmography,
    read_filmography,
    write_filmography,
)

__all__ = [
    "delete_filmography",
    "empty_filmography",
    "get_filmography",
    "read_filmography",
    "write_filmography",
]
