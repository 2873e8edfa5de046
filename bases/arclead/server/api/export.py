from typing import Annotated, Any

from fastapi import APIRouter, Depends

from arclead import export
from arclead.export import ExportKey
from arclead.fs import Bucket, with_bucket
from arclead.log import get_logger
from arclead.server.config import config
from arclead.server.helpers import fails_with

_log = get_logger(__name__)

api_router = APIRouter(prefix="/api/export", tags=["export"])


@api_router.get("/artists")
def export_artists(
    bucket: Annotated[Bucket, Depends(with_bucket)], key: ExportKey = ExportKey.NAME
) -> dict[str, dict[str, Any]]:
    """Artist display data for the public site"""
    _log.info(f"Exporting artists keyed by {key}")
    with fails_with("Failed to export artists data"):
        return export.export_artists(bucket, config.export_title_suffix, key)


@api_router.get("/filmography")
def export_filmography(
    bucket: Annotated[Bucket, Depends(with_bucket)],
) -> dict[str, dict[str, Any]]:
    """Filmography per artist for the public site"""
    with fails_with("Failed to export filmography data"):
        return export.export_filmography(bucket)
