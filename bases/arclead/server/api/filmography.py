from typing import Annotated, Any

from fastapi import APIRouter, Depends

from arclead import filmography
from arclead.fs import Bucket, with_bucket
from arclead.log import get_logger
from arclead.models.artists import Success
from arclead.models.filmography import Filmography
from arclead.server.helpers import fails_with

_log = get_logger(__name__)

api_router = APIRouter(prefix="/api/artists", tags=["filmography"])


@api_router.get("/{artistId}/filmography")
def get_filmography(
    artistId: str, bucket: Annotated[Bucket, Depends(with_bucket)]
) -> dict[str, Any]:
    with fails_with("Failed to get filmography"):
        return filmography.get_filmography(bucket, artistId)


@api_router.put("/{artistId}/filmography")
def update_filmography(
    artistId: str,
    details: Filmography,
    bucket: Annotated[Bucket, Depends(with_bucket)],
) -> Success:
    _log.info(f"Replacing filmography of {artistId}")
    with fails_with("Failed to update filmography"):
        filmography.write_filmography(bucket, artistId, details.document())
    return Success()
