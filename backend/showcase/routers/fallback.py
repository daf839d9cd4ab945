"""Catch-all for unmatched /api/ requests.

Registered after every resource router so an unknown kind, an unwired method
or an unexpected path shape under /api/ is a 404 and never reaches static
file serving.
"""

from fastapi import APIRouter, HTTPException

router = APIRouter(prefix="/api", include_in_schema=False)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{rest:path}", methods=ALL_METHODS)
async def api_not_found(rest: str):
    raise HTTPException(status_code=404)
