"""Contact form submission endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from showcase.body import collect_json_body
from showcase.dependencies import get_store, record_id_from_path
from showcase.schemas import SuccessResponse
from showcase.store import ResourceStore

router = APIRouter(prefix="/api/contact-submissions", tags=["Contact"])


@router.get("")
async def list_submissions(
    store: ResourceStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List all submissions (admin page)."""
    return store.submissions.list()


@router.post("", response_model=SuccessResponse)
async def submit_contact_form(
    fields: Dict[str, Any] = Depends(collect_json_body),
    store: ResourceStore = Depends(get_store),
):
    """Store a submission with a server-side createdAt; the record itself is not echoed."""
    store.create_submission(fields)
    return SuccessResponse()


@router.delete("/{rest:path}", response_model=SuccessResponse)
async def delete_submission(
    rest: str,
    store: ResourceStore = Depends(get_store),
):
    store.submissions.delete_by_id(record_id_from_path(rest))
    return SuccessResponse()
