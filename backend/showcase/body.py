"""Lenient JSON request body parsing."""

import json
import logging
from typing import Any, Dict

from fastapi import Request

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json_object(raw: bytes) -> Dict[str, Any]:
    """Parse ``raw`` as a JSON object.

    An empty body, invalid UTF-8, invalid JSON (including the ``NaN`` and
    ``Infinity`` literals Python would otherwise accept), or any JSON value
    other than an object all come back as ``{}``.
    """
    try:
        data = json.loads(raw.decode("utf-8") or "{}", parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        logger.debug(f"Ignoring unparsable request body: {e}")
        return {}
    if not isinstance(data, dict):
        logger.debug(f"Ignoring non-object request body of type {type(data).__name__}")
        return {}
    return data


async def collect_json_body(request: Request) -> Dict[str, Any]:
    """Dependency that reads the whole request body and parses it leniently."""
    return parse_json_object(await request.body())
