"""Client pages and static assets.

No method restriction applies here: any request that is not an API call is
answered from the client directory.
"""

from fastapi import APIRouter, Depends

from showcase.config import Settings
from showcase.dependencies import get_settings
from showcase.routers.fallback import ALL_METHODS
from showcase.static import serve_static

router = APIRouter(include_in_schema=False)


@router.api_route("/admin", methods=ALL_METHODS)
@router.api_route("/admin.html", methods=ALL_METHODS)
async def admin_page(settings: Settings = Depends(get_settings)):
    return await serve_static(settings.client_path, "admin.html")


@router.api_route("/", methods=ALL_METHODS)
@router.api_route("/index.html", methods=ALL_METHODS)
async def index_page(settings: Settings = Depends(get_settings)):
    return await serve_static(settings.client_path, "index.html")


@router.api_route("/{full_path:path}", methods=ALL_METHODS)
async def client_asset(full_path: str, settings: Settings = Depends(get_settings)):
    return await serve_static(settings.client_path, full_path)
