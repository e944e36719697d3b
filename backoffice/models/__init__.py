"""Pydantic request models for the back-office API."""

from backoffice.models.daily_stock import RecordCreate, RecordUpdate, StockItemPayload
from backoffice.models.garden import GardenBookingIn, GardenBookingUpdate
from backoffice.models.inventory import CategoryIn, InventoryItemIn, InventoryItemUpdate
from backoffice.models.menu import MenuItemIn, MenuItemUpdate
from backoffice.models.rooms import ClientIn, RoomBookingIn, RoomBookingUpdate, RoomIn, RoomUpdate
from backoffice.models.users import LoginRequest, RegisterRequest

__all__ = [
    "RecordCreate",
    "RecordUpdate",
    "StockItemPayload",
    "CategoryIn",
    "InventoryItemIn",
    "InventoryItemUpdate",
    "MenuItemIn",
    "MenuItemUpdate",
    "RoomIn",
    "RoomUpdate",
    "ClientIn",
    "RoomBookingIn",
    "RoomBookingUpdate",
    "GardenBookingIn",
    "GardenBookingUpdate",
    "LoginRequest",
    "RegisterRequest",
]
