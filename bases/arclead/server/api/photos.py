from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from arclead import photo as photos
from arclead.fs import Bucket, with_bucket
from arclead.log import get_logger
from arclead.models.artists import Success
from arclead.models.photos import MainPhotoRequest, Photo, PhotoUploaded
from arclead.server.helpers import fails_with, not_found

_log = get_logger(__name__)

api_router = APIRouter(prefix="/api/artists", tags=["photos"])


@api_router.get("/{artistId}/photos")
def list_photos(
    artistId: str, bucket: Annotated[Bucket, Depends(with_bucket)]
) -> list[Photo]:
    _log.debug(f"{artistId}/photos called")
    with fails_with("Failed to get photos"):
        return photos.list_photos(bucket, artistId)


@api_router.post("/{artistId}/photos")
def upload_photo(
    artistId: str,
    bucket: Annotated[Bucket, Depends(with_bucket)],
    photo: Annotated[UploadFile | None, File()] = None,
) -> PhotoUploaded:
    if photo is None:
        _log.warning(f"Upload for {artistId} without a photo")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="No photo provided"
        )

    with fails_with("Failed to upload photo"):
        photo_id, url = photos.upload_photo(
            bucket, artistId, photo.filename, photo.file.read(), photo.content_type
        )
    return PhotoUploaded(photoId=photo_id, url=url)


@api_router.delete("/{artistId}/photos/{photoId}")
def delete_photo(
    artistId: str, photoId: str, bucket: Annotated[Bucket, Depends(with_bucket)]
) -> Success:
    with fails_with("Failed to delete photo"):
        photos.delete_photo(bucket, artistId, photoId)
    return Success()


@api_router.put("/{artistId}/main-photo")
def set_main_photo(
    artistId: str,
    details: MainPhotoRequest,
    bucket: Annotated[Bucket, Depends(with_bucket)],
) -> Success:
    with fails_with("Failed to set main photo"):
        key = photos.set_main_photo(bucket, artistId, details.photoId)

    if key is None:
        _log.warning(f"Main photo {details.photoId} for {artistId} not found")
        raise not_found("Photo")
    return Success()
