"""Pydantic record shapes.

Records are schema-less at runtime: whatever a client posts is merged into
the stored record verbatim. These models describe the fields the site's
client pages rely on and are used to build the seed data.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int


# ── Content Schemas ──────────────────────────────────────────────────────────

class Banner(_Record):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    imageUrl: Optional[str] = None
    ctaLabel: Optional[str] = None
    ctaLink: Optional[str] = None


class Product(_Record):
    name: Optional[str] = None
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    category: Optional[str] = None


class Event(_Record):
    title: Optional[str] = None
    description: Optional[str] = None
    # Free-form; the client displays it as-is
    date: Optional[str] = None


class Testimonial(_Record):
    name: Optional[str] = None
    company: Optional[str] = None
    message: Optional[str] = None


# ── Response Schemas ─────────────────────────────────────────────────────────

class SuccessResponse(BaseModel):
    success: bool = True
