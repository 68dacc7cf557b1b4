"""
Static serving of the built single-page front end.

``build_router`` returns a router with a catch-all ``GET`` route.  A
request path that names a file inside the static directory is served
as that file.  Anything else gets ``index.html`` when the single-page
fallback is enabled, so the client-side router can handle it, and 404
otherwise.  Paths under ``/api`` never fall back: an unknown API route
is always a JSON 404.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def _resolve_asset(root: Path, request_path: str) -> Optional[Path]:
    """Map a URL path onto a file under ``root``.

    Returns ``None`` for directories, missing files and anything that
    resolves outside ``root`` (e.g. ``../`` segments or symlinks).
    """
    if not request_path:
        return None
    candidate = (root / request_path).resolve()
    try:
        candidate.relative_to(root)
    except ValueError:
        return None
    if not candidate.is_file():
        return None
    return candidate


def build_router(static_dir: str, spa_fallback: bool = True) -> APIRouter:
    """Create the catch-all router serving files from ``static_dir``."""
    root = Path(static_dir).resolve()
    index = root / INDEX_FILE
    router = APIRouter()

    if not index.is_file():
        logger.warning("No %s found in %s; single-page fallback will return 404", INDEX_FILE, root)

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str) -> FileResponse:
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        asset = _resolve_asset(root, full_path)
        if asset is not None:
            return FileResponse(asset)

        if (spa_fallback or not full_path) and index.is_file():
            return FileResponse(index)

        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    return router
