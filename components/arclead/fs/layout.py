"""Where every document and photo lives inside the bucket."""

ARTISTS_KEY = "data/artists.json"

DEFAULT_PHOTO_EXTENSION = "jpg"


def filmography_key(artist_id: str) -> str:
    return f"data/filmography/{artist_id}.json"


def artist_prefix(artist_id: str) -> str:
    return f"artists/{artist_id}/"


def photos_prefix(artist_id: str) -> str:
    return f"artists/{artist_id}/photos/"


def photo_prefix(artist_id: str, photo_id: str) -> str:
    # Trailing dot so "abc" never matches "abcd.png"
    return f"{photos_prefix(artist_id)}{photo_id}."


def photo_key(artist_id: str, photo_id: str, extension: str) -> str:
    return f"{photo_prefix(artist_id, photo_id)}{extension}"


def main_photo_prefix(artist_id: str) -> str:
    return f"artists/{artist_id}/main."


def main_photo_key(artist_id: str, extension: str) -> str:
    return f"{main_photo_prefix(artist_id)}{extension}"


def extension_of(key: str) -> str:
    name = key.rsplit("/", 1)[-1]
    if "." not in name:
        return DEFAULT_PHOTO_EXTENSION
    return name.split(".", 1)[1] or DEFAULT_PHOTO_EXTENSION


def upload_extension(filename: str | None) -> str:
    """Extension of an uploaded file name, ``jpg`` when it has none."""
    if not filename or "." not in filename:
        return DEFAULT_PHOTO_EXTENSION
    extension = filename.rsplit(".", 1)[1]
    # Anything but letters and digits could escape the photo's key
    if not extension.isascii() or not extension.isalnum():
        return DEFAULT_PHOTO_EXTENSION
    return extension


def photo_id_of(key: str) -> str:
    return key.rsplit("/", 1)[-1].split(".", 1)[0]
