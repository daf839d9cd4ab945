"""Shared response helpers."""

from fastapi.responses import PlainTextResponse

NOT_FOUND_BODY = "Not found"


def not_found() -> PlainTextResponse:
    """The one error response the server sends: 404 with a plain-text body."""
    # Bare text/plain, without the charset Starlette appends by default
    return PlainTextResponse(
        NOT_FOUND_BODY, status_code=404, headers={"content-type": "text/plain"}
    )
