"""Request bodies for garden bookings."""

from datetime import date, time
from typing import Optional

from pydantic import BaseModel, Field

from backoffice.models.fields import Amount
from backoffice.models.rooms import BookingStatus


class GardenBookingIn(BaseModel):
    client_name: str = Field(..., min_length=1, max_length=255)
    client_contact: Optional[str] = Field(None, max_length=255)
    booking_date: date
    start_time: time
    end_time: time
    number_of_guests: Optional[int] = Field(None, ge=1)
    purpose: Optional[str] = None
    total_price: Optional[Amount] = None
    status: BookingStatus = "Pending"


class GardenBookingUpdate(BaseModel):
    client_name: Optional[str] = Field(None, min_length=1, max_length=255)
    client_contact: Optional[str] = Field(None, max_length=255)
    booking_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    number_of_guests: Optional[int] = Field(None, ge=1)
    purpose: Optional[str] = None
    total_price: Optional[Amount] = None
    status: Optional[BookingStatus] = None
