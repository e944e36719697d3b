"""Re-export all ORM models so Base.metadata has all tables."""

from backoffice.db.models.daily_stock import DailyStockItemDetail, DailyStockRecord
from backoffice.db.models.garden import GardenBooking
from backoffice.db.models.inventory import Category, InventoryItem
from backoffice.db.models.menu import MenuItem
from backoffice.db.models.rooms import Client, Room, RoomBooking
from backoffice.db.models.user import User

__all__ = [
    "Category",
    "InventoryItem",
    "MenuItem",
    "User",
    "DailyStockRecord",
    "DailyStockItemDetail",
    "Room",
    "Client",
    "RoomBooking",
    "GardenBooking",
]
