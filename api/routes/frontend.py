"""
Catch-all serving the bundled single-page frontend.

Must be included after every API router: it matches any path.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse

from api.dependencies import get_context
from api.errors import error_response
from core.context import AppContext
from core.exceptions import NotFoundError

router = APIRouter(include_in_schema=False)

API_PREFIXES = (
    "/run-notebook",
    "/list-notebooks",
    "/run-status",
    "/auth",
    "/users",
    "/organizations",
    "/notebooks",
    "/dashboard",
    "/health",
)

ENTRY_DOCUMENT = "index.html"


def _is_api_path(path: str) -> bool:
    return any(path == prefix or path.startswith(prefix + "/") for prefix in API_PREFIXES)


def _not_found(path: str):
    return error_response(NotFoundError("Not found", context={"lookup": path}))


@router.api_route("/{full_path:path}", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def frontend(full_path: str, request: Request, context: AppContext = Depends(get_context)):
    """
    - Unmatched API paths are 404 for every method
    - Dotted paths are static assets, served to GET/HEAD from the dist directory when present
    - Every other path gets the frontend's entry document, whatever the method
    """
    path = request.url.path
    if _is_api_path(path):
        return _not_found(path)

    dist = Path(context.settings.FRONTEND_DIST).resolve()

    if "." in path:
        if request.method not in ("GET", "HEAD"):
            return _not_found(path)
        asset = (dist / full_path).resolve()
        if asset.is_relative_to(dist) and asset.is_file():
            return FileResponse(asset)
        return _not_found(path)

    entry = dist / ENTRY_DOCUMENT
    if not entry.is_file():
        return _not_found(path)
    return FileResponse(entry)
