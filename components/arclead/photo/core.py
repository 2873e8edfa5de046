import uuid

from arclead.fs import Bucket, layout
from arclead.log import get_logger
from arclead.models.photos import Photo

_log = get_logger(__name__)

# User metadata on the main photo copy naming the photo it came from
SOURCE_PHOTO_META = "photo-id"


def new_photo_id() -> str:
    return uuid.uuid4().hex


def main_photo_key(bucket: Bucket, artist_id: str) -> str | None:
    keys = bucket.list_keys(layout.main_photo_prefix(artist_id))
    return keys[0] if keys else None


def main_photo_url(bucket: Bucket, artist_id: str) -> str | None:
    """URL of the artist's main photo, None when there is none or lookup fails."""
    try:
        key = main_photo_key(bucket, artist_id)
    except Exception as e:
        _log.error(f"Main photo lookup failed for {artist_id}: {e}")
        return None

    if key is None:
        return None
    return bucket.url(key)


def main_photo_source(bucket: Bucket, artist_id: str) -> str | None:
    key = main_photo_key(bucket, artist_id)
    if key is None:
        return None

    metadata = bucket.metadata(key)
    if not metadata:
        return None
    return metadata.get(SOURCE_PHOTO_META)


def list_photos(bucket: Bucket, artist_id: str) -> list[Photo]:
    main_source = main_photo_source(bucket, artist_id)

    photos: list[Photo] = []
    for key in bucket.list_keys(layout.photos_prefix(artist_id)):
        photo_id = layout.photo_id_of(key)
        photos.append(
            Photo(id=photo_id, url=bucket.url(key), isMain=photo_id == main_source)
        )

    _log.debug(f"{artist_id} has {len(photos)} photos")
    return photos


def upload_photo(
    bucket: Bucket,
    artist_id: str,
    filename: str | None,
    data: bytes,
    content_type: str | None,
) -> tuple[str, str]:
    """Store an uploaded photo, returning its new id and URL."""
    photo_id = new_photo_id()
    key = layout.photo_key(artist_id, photo_id, layout.upload_extension(filename))

    bucket.write_bytes(key, data, content_type or "application/octet-stream")
    _log.info(f"Stored photo {photo_id} for {artist_id} at {key}")

    return photo_id, bucket.url(key)


def delete_photo(bucket: Bucket, artist_id: str, photo_id: str) -> int:
    keys = bucket.list_keys(layout.photo_prefix(artist_id, photo_id))
    for key in keys:
        bucket.delete(key)

    _log.info(f"Deleted {len(keys)} objects for photo {photo_id} of {artist_id}")
    return len(keys)


def set_main_photo(bucket: Bucket, artist_id: str, photo_id: str) -> str | None:
    """
    Copy a photo to the artist's main photo key.

    The copy keeps the source extension and content type, and records the
    source photo id in its metadata. Returns the main photo key, or None
    when the photo doesn't exist.
    """
    keys = bucket.list_keys(layout.photo_prefix(artist_id, photo_id))
    if not keys:
        return None

    source_key = keys[0]
    source = bucket.read_bytes(source_key)
    if source is None:
        return None
    data, content_type = source

    target_key = layout.main_photo_key(artist_id, layout.extension_of(source_key))

    for old_key in bucket.list_keys(layout.main_photo_prefix(artist_id)):
        if old_key != target_key:
            bucket.delete(old_key)

    bucket.write_bytes(
        target_key, data, content_type, metadata={SOURCE_PHOTO_META: photo_id}
    )
    _log.info(f"Main photo of {artist_id} set from {source_key}")

    return target_key
