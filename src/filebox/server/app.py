"""FastAPI application factory."""

import logging
import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from filebox.config.models import ServerConfig
from filebox.errors import FileboxError
from filebox.server.routers.files import router as files_router
from filebox.storage import FileStore

logger = logging.getLogger(__name__)


def create_app(config: ServerConfig) -> FastAPI:
    """
    Create and configure FastAPI application.

    The trusted root is resolved once here. Requests never consult the
    working directory.

    Args:
        config: Server configuration

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="filebox",
        description="Minimal create-only HTTP file server",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    trusted_root = Path(os.path.realpath(config.trusted_root))

    app.state.config = config
    app.state.store = FileStore(trusted_root)

    if not trusted_root.is_dir():
        logger.warning(f"Trusted root does not exist: {trusted_root}")

    @app.exception_handler(FileboxError)
    async def filebox_error_handler(request: Request, exc: FileboxError) -> Response:
        logger.error(f"ERROR --> {exc.status_code}")
        logger.error(str(exc))
        return Response(status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        logger.error(f"ERROR --> {exc.status_code}")
        logger.error(f"Method: {request.method}")
        return Response(status_code=exc.status_code, headers=exc.headers)

    app.include_router(files_router)

    return app
