"""Inventory and category API."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from backoffice.api.deps import require_admin, require_staff
from backoffice.auth.context import UserContext
from backoffice.db.repositories import category_repo, inventory_repo
from backoffice.models.inventory import CategoryIn, InventoryItemIn, InventoryItemUpdate

router = APIRouter(prefix="/api", tags=["inventory"])


@router.get("/inventory")
def list_inventory(
    active_only: bool = Query(False),
    _: UserContext = Depends(require_staff),
) -> list[dict[str, Any]]:
    return inventory_repo.list_items(active_only=active_only)


@router.get("/inventory/{item_id}")
def get_inventory_item(item_id: int, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return inventory_repo.get_item(item_id)


@router.post("/inventory", status_code=201)
def create_inventory_item(body: InventoryItemIn, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return inventory_repo.create_item(**body.model_dump())


@router.put("/inventory/{item_id}")
def update_inventory_item(
    item_id: int,
    body: InventoryItemUpdate,
    _: UserContext = Depends(require_admin),
) -> dict[str, Any]:
    return inventory_repo.update_item(item_id, **body.model_dump(exclude_unset=True))


@router.delete("/inventory/{item_id}", status_code=204)
def delete_inventory_item(item_id: int, _: UserContext = Depends(require_admin)) -> Response:
    inventory_repo.delete_item(item_id)
    return Response(status_code=204)


@router.get("/categories")
def list_categories(_: UserContext = Depends(require_staff)) -> list[dict[str, Any]]:
    return category_repo.list_categories()


@router.post("/categories", status_code=201)
def create_category(body: CategoryIn, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return category_repo.create_category(body.name)
