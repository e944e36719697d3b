"""Menu items API: staff read, admins write."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from backoffice.api.deps import require_admin, require_staff
from backoffice.auth.context import UserContext
from backoffice.db.repositories import menu_repo
from backoffice.models.menu import MenuItemIn, MenuItemUpdate

router = APIRouter(prefix="/api/menu-items", tags=["menu"])


@router.get("")
def list_menu_items(
    search: Optional[str] = Query(None, description="Name or description"),
    category_id: Optional[int] = Query(None),
    is_available: Optional[bool] = Query(None),
    _: UserContext = Depends(require_staff),
) -> list[dict[str, Any]]:
    return menu_repo.list_menu_items(search=search, category_id=category_id, is_available=is_available)


@router.post("", status_code=201)
def create_menu_item(body: MenuItemIn, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return menu_repo.create_menu_item(**body.model_dump())


@router.put("/{item_id}")
def update_menu_item(item_id: int, body: MenuItemUpdate, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return menu_repo.update_menu_item(item_id, **body.model_dump(exclude_unset=True))


@router.delete("/{item_id}")
def delete_menu_item(item_id: int, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return menu_repo.delete_menu_item(item_id)
