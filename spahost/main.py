"""FastAPI application factory and uvicorn runner for the static host."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from spahost.config import Settings
from spahost.static import SPAStaticFiles

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """
    Build the ASGI app serving ``settings.ASSET_ROOT`` with SPA fallback.

    Raises RuntimeError if the asset root does not exist.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving {settings.asset_root} (fallback: {settings.fallback_file})")
        if not settings.fallback_file.is_file():
            logger.warning(f"Fallback file {settings.fallback_file} not found; unmatched paths will 404")
        yield

    # Docs and schema routes would shadow asset paths of the same name
    app = FastAPI(
        title="spahost",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Every path belongs to the static host; there are no API routes
    app.mount(
        "/",
        SPAStaticFiles(
            directory=str(settings.asset_root),
            fallback=str(settings.fallback_file),
        ),
        name="static",
    )
    return app


def serve(app: FastAPI, settings: Settings) -> None:
    """Bind the listener, announce the port and serve until interrupted.

    Exits the process with a non-zero status if the address cannot be bound.
    """
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        timeout_keep_alive=settings.TIMEOUT_KEEP_ALIVE,
    )
    # bind_socket logs the OS error and exits the process on failure
    sock = config.bind_socket()
    print(f"Listening on port {settings.PORT}")
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
