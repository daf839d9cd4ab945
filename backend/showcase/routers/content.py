"""Site content endpoints: banners, products, events and testimonials.

Every content kind exposes the same three operations, so the routers are
built from one factory.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from showcase.body import collect_json_body
from showcase.dependencies import get_store, record_id_from_path
from showcase.schemas import SuccessResponse
from showcase.store import CONTENT_KINDS, ResourceStore


def build_content_router(kind: str) -> APIRouter:
    router = APIRouter(prefix=f"/api/{kind}", tags=[kind.capitalize()])

    @router.get("", name=f"list_{kind}")
    async def list_records(
        store: ResourceStore = Depends(get_store),
    ) -> List[Dict[str, Any]]:
        return store.get(kind).list()

    @router.post("", name=f"create_{kind}")
    async def create_record(
        fields: Dict[str, Any] = Depends(collect_json_body),
        store: ResourceStore = Depends(get_store),
    ) -> Dict[str, Any]:
        """Create a record from whatever fields were posted; the id is assigned here."""
        return store.get(kind).create(fields)

    @router.delete("/{rest:path}", response_model=SuccessResponse, name=f"delete_{kind}")
    async def delete_record(
        rest: str,
        store: ResourceStore = Depends(get_store),
    ):
        store.get(kind).delete_by_id(record_id_from_path(rest))
        return SuccessResponse()

    return router


routers = [build_content_router(kind) for kind in CONTENT_KINDS]
