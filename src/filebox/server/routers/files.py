"""File router.

Every path routes here. GET serves an existing file and PUT creates a new
one. Any other method is rejected by the router with 405. Failures are
raised as FileboxError and turned into bare status responses by the app.
"""

import logging
import mimetypes

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from filebox.errors import StorageError
from filebox.server.dependencies import get_store
from filebox.storage import FileStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


@router.get("/{file_path:path}", response_class=Response)
async def get_file(
    file_path: str,
    store: FileStore = Depends(get_store),
) -> Response:
    """Return the full content of a file under the trusted root.

    Args:
        file_path: Decoded request path (injected)
        store: File store (injected)

    Returns:
        File bytes with a guessed content type
    """
    path = await run_in_threadpool(store.resolve_read, file_path)
    data = await run_in_threadpool(store.read, path)

    logger.info(f"Success! --> 200, ({len(data)} bytes)")

    media_type, _ = mimetypes.guess_type(path.name)
    return Response(
        content=data,
        media_type=media_type or "application/octet-stream",
        headers={"X-Content-Type-Options": "nosniff"},
    )


@router.put("/{file_path:path}", response_class=Response)
async def put_file(
    request: Request,
    file_path: str,
    store: FileStore = Depends(get_store),
) -> Response:
    """Create a new file from the request body.

    The path is validated before the body is read. The body is buffered in
    full and stored verbatim.
    """
    logger.debug(f"PUT path: {file_path}")

    path = await run_in_threadpool(store.resolve_write, file_path)

    try:
        body = await request.body()
    except ClientDisconnect as e:
        raise StorageError("client disconnected before the body was read") from e

    await run_in_threadpool(store.create, path, body)

    logger.info("Success! --> 200")
    return Response(status_code=200)
