"""ORM model for garden (event space) bookings."""

from datetime import date, time
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Integer, Numeric, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base, TimestampMixin


class GardenBooking(Base, TimestampMixin):
    """Time slot in the garden; the client is stored by name, not linked to clients."""

    __tablename__ = "garden_bookings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    number_of_guests: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    purpose: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
