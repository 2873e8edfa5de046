from arclead.photo.core import (
    delete_photo,
    list_photos,
    main_photo_key,
    main_photo_url,
    set_main_photo,
    upload_photo,
)

__all__ = [
    "delete_photo",
    "list_photos",
    "main_photo_key",
    "main_photo_url",
    "set_main_photo",
    "upload_photo",
]
