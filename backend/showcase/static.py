"""Static file serving from the client directory."""

import logging
import os
import posixpath
from pathlib import Path
from typing import Optional

from fastapi import Response
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

from showcase.responses import not_found

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


def content_type_for(name: str) -> str:
    ext = posixpath.splitext(name)[1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def resolve_client_path(root: Path, name: str) -> Optional[Path]:
    """Map a request path onto a file path under ``root``.

    Returns ``None`` when the path has a ``..`` segment or otherwise resolves
    outside the root.
    """
    relative = name.lstrip("/")
    if ".." in relative.replace("\\", "/").split("/"):
        return None
    try:
        base = root.resolve()
        candidate = (base / relative).resolve()
    except (OSError, ValueError):
        return None
    if candidate != base and base not in candidate.parents:
        return None
    return candidate


def _readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


async def serve_static(root: Path, name: str) -> Response:
    """Stream ``name`` from under ``root``, or respond with a 404."""
    path = resolve_client_path(root, name)
    if path is None:
        logger.warning(f"Rejected static path outside client directory: {name!r}")
        return not_found()

    # FileResponse only fails at send time, so check up front
    try:
        readable = await run_in_threadpool(_readable_file, path)
    except (OSError, ValueError) as e:
        logger.debug(f"Static file {name!r} not served: {e}")
        return not_found()
    if not readable:
        logger.debug(f"Static file {name!r} not found")
        return not_found()

    # Explicit header keeps the bare type (no "; charset=" suffix)
    content_type = content_type_for(name)
    return FileResponse(path, media_type=content_type, headers={"content-type": content_type})
