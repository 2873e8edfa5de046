from arclead.server.config import config
from arclead.log import get_logger, configure_logging

configure_logging(config.log_level, config.log_file)

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from arclead.server.api.artist import api_router as artist_router
from arclead.server.api.photos import api_router as photo_router
from arclead.server.api.filmography import api_router as filmography_router
from arclead.server.api.export import api_router as export_router
from arclead.server.errors import register_error_handlers
from arclead.server.helpers import CORS_HEADERS
from arclead.fs import setup_minio

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_minio(
        config.minio_url,
        config.minio_access_key,
        config.minio_secret_key,
        bucket=config.minio_bucket,
        public_base_url=config.public_base_url,
        secure=config.minio_secure,
    )
    log.info("Arclead API started")

    yield

    log.info("Arclead API shutting down")


app = FastAPI(
    title="Arclead Entertainment API", lifespan=lifespan, redirect_slashes=False
)


@app.middleware("http")
async def cors(request: Request, call_next):
    # Preflight for any path, matched route or not
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


register_error_handlers(app)

# Order is precedence
app.include_router(artist_router)
app.include_router(photo_router)
app.include_router(filmography_router)
app.include_router(export_router)


@app.get("/", response_class=PlainTextResponse)
async def banner() -> str:
    return "Arclead Entertainment API"
