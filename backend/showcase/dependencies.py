"""Shared FastAPI dependencies."""

import re
from typing import Optional

from fastapi import Request

from showcase.config import Settings
from showcase.store import ResourceStore

_LEADING_INT_RE = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d*))")


def get_store(request: Request) -> ResourceStore:
    """Dependency that returns the application's resource store."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def parse_record_id(segment: str) -> Optional[int]:
    """Read an integer id from the start of a path segment.

    Reads like JavaScript's ``parseInt``: leading whitespace and trailing
    characters are ignored, so ``"42abc"`` reads as 42, and a ``0x`` prefix
    switches to hexadecimal. A segment without leading digits gives ``None``,
    which matches no record.
    """
    sign, hex_digits, dec_digits = _LEADING_INT_RE.match(segment).groups()
    if hex_digits:
        value = int(hex_digits, 16)
    elif dec_digits:
        value = int(dec_digits)
    else:
        return None
    return -value if sign == "-" else value


def record_id_from_path(rest: str) -> Optional[int]:
    """Take the id from the first segment after ``/api/<kind>/``."""
    return parse_record_id(rest.split("/", 1)[0])
