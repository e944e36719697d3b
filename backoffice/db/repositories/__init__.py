"""DB repositories: sync functions returning JSON-shaped dicts."""

from backoffice.db.repositories.category_repo import create_category, list_categories
from backoffice.db.repositories.inventory_repo import (
    create_item as inventory_create,
    delete_item as inventory_delete,
    get_item as inventory_get,
    list_items as inventory_list,
    update_item as inventory_update,
)
from backoffice.db.repositories.user_repo import authenticate, create_user, get_user

__all__ = [
    "create_category",
    "list_categories",
    "inventory_create",
    "inventory_delete",
    "inventory_get",
    "inventory_list",
    "inventory_update",
    "authenticate",
    "create_user",
    "get_user",
]
