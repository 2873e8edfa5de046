from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from arclead import artist as artists
from arclead.fs import Bucket, with_bucket
from arclead.log import get_logger
from arclead.models.artists import ArtistCreated, NewArtist, Success
from arclead.models.filmography import Filmography
from arclead.server.helpers import fails_with, not_found

_log = get_logger(__name__)

api_router = APIRouter(prefix="/api/artists", tags=["artists"])


@api_router.get("")
def list_artists(bucket: Annotated[Bucket, Depends(with_bucket)]) -> list[dict[str, Any]]:
    _log.info("list_artists called")
    with fails_with("Failed to get artists"):
        return artists.list_artists(bucket)


@api_router.post("")
def create_artist(
    details: NewArtist, bucket: Annotated[Bucket, Depends(with_bucket)]
) -> ArtistCreated:
    _log.info(f"Creating a new artist: {details.name}")
    with fails_with("Failed to create artist"):
        filmography = details.filmography.document() if details.filmography is not None else None
        artist_id = artists.create_artist(bucket, details.name, filmography)
    return ArtistCreated(artistId=artist_id)


@api_router.get("/{artistId}")
def get_artist(
    artistId: str, bucket: Annotated[Bucket, Depends(with_bucket)]
) -> dict[str, Any]:
    _log.debug(f"get artist called: {artistId}")
    with fails_with("Failed to get artist"):
        artist = artists.get_artist(bucket, artistId)

    if artist is None:
        _log.warning(f"{artistId} requested, but not found")
        raise not_found("Artist")
    return artist


@api_router.put("/{artistId}")
def update_artist(
    artistId: str,
    updates: Annotated[dict[str, Any], Body()],
    bucket: Annotated[Bucket, Depends(with_bucket)],
) -> Success:
    _log.info(f"Updating {artistId}")
    if updates.get("filmography") is not None:
        try:
            filmography = Filmography.model_validate(updates["filmography"])
        except ValidationError as e:
            _log.warning(f"Update for {artistId} with a malformed filmography: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid filmography"
            )
        updates["filmography"] = filmography.document()

    with fails_with("Failed to update artist"):
        updated = artists.update_artist(bucket, artistId, updates)

    if not updated:
        _log.warning(f"Update for {artistId}, but not found")
        raise not_found("Artist")
    return Success()


@api_router.delete("/{artistId}")
def delete_artist(artistId: str, bucket: Annotated[Bucket, Depends(with_bucket)]) -> Success:
    _log.info(f"Deleting {artistId}")
    with fails_with("Failed to delete artist"):
        artists.delete_artist(bucket, artistId)
    return Success()
