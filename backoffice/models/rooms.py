"""Request bodies for rooms, clients and room bookings."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from backoffice.models.fields import Amount

RoomStatus = Literal["Available", "Occupied", "Maintenance"]
BookingStatus = Literal["Pending", "Confirmed", "Checked-in", "Completed", "Cancelled"]


class RoomIn(BaseModel):
    room_number: str = Field(..., min_length=1, max_length=20)
    type: str = Field(..., min_length=1, max_length=50)
    price_per_night: Amount
    status: RoomStatus = "Available"


class RoomUpdate(BaseModel):
    room_number: Optional[str] = Field(None, min_length=1, max_length=20)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    price_per_night: Optional[Amount] = None
    status: Optional[RoomStatus] = None


class ClientIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)


class RoomBookingIn(BaseModel):
    """total_price defaults to nights x the room's price_per_night."""

    room_id: int
    client_id: int
    check_in_date: date
    check_out_date: date
    total_price: Optional[Amount] = None
    status: BookingStatus = "Pending"


class RoomBookingUpdate(BaseModel):
    room_id: Optional[int] = None
    client_id: Optional[int] = None
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    total_price: Optional[Amount] = None
    status: Optional[BookingStatus] = None
