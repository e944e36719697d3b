"""Room bookings repository: bookings joined with their room and client."""

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from backoffice.db import get_session
from backoffice.db.models.rooms import BOOKING_STATUSES, Client, Room, RoomBooking
from backoffice.db.repositories.common import clean_fields, reject_nulls, require_values
from backoffice.errors import NotFoundError, ValidationError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity, to_decimal

logger = get_logger("backoffice.db.booking_repo")

_FIELDS = {"room_id", "client_id", "check_in_date", "check_out_date", "total_price", "status"}
_REQUIRED = ("room_id", "client_id", "check_in_date", "check_out_date")


def booking_to_dict(booking: RoomBooking) -> dict[str, Any]:
    return {
        "id": booking.id,
        "room_id": booking.room_id,
        "client_id": booking.client_id,
        "check_in_date": booking.check_in_date.isoformat(),
        "check_out_date": booking.check_out_date.isoformat(),
        "total_price": format_quantity(booking.total_price),
        "status": booking.status,
        "room_number": booking.room.room_number if booking.room else None,
        "room_type": booking.room.type if booking.room else None,
        "client_name": booking.client.name if booking.client else None,
    }


def _validate(session: Session, booking: RoomBooking) -> None:
    """Room and client must exist and the stay must be at least one night."""
    room = session.get(Room, booking.room_id)
    if room is None:
        raise ValidationError(f"Room {booking.room_id} does not exist.", field="room_id")
    if session.get(Client, booking.client_id) is None:
        raise ValidationError(f"Client {booking.client_id} does not exist.", field="client_id")
    if booking.check_out_date <= booking.check_in_date:
        raise ValidationError("check_out_date must be after check_in_date.", field="check_out_date")
    if booking.status not in BOOKING_STATUSES:
        raise ValidationError(f"Unknown booking status: {booking.status!r}", field="status")
    if booking.total_price is None:
        nights = (booking.check_out_date - booking.check_in_date).days
        booking.total_price = to_decimal(room.price_per_night * Decimal(nights))


def list_bookings(search: Optional[str] = None, status: Optional[str] = None) -> list[dict[str, Any]]:
    """Bookings by id; `search` matches room number or client name, case-insensitive."""
    with get_session() as session:
        q = (
            select(RoomBooking)
            .join(Room, Room.id == RoomBooking.room_id)
            .join(Client, Client.id == RoomBooking.client_id)
        )
        if search:
            pattern = f"%{search}%"
            q = q.where(or_(Room.room_number.ilike(pattern), Client.name.ilike(pattern)))
        if status:
            q = q.where(RoomBooking.status == status)
        q = q.order_by(RoomBooking.id.asc())
        return [booking_to_dict(b) for b in session.scalars(q).unique().all()]


def get_booking(booking_id: int) -> dict[str, Any]:
    with get_session() as session:
        booking = session.get(RoomBooking, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking_to_dict(booking)


def create_booking(**fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("total_price",))
    require_values(values, _REQUIRED)
    values.setdefault("status", "Pending")
    with get_session() as session:
        booking = RoomBooking(**values)
        _validate(session, booking)
        session.add(booking)
        session.flush()
        logger.info("bookings.create", booking_id=booking.id, room_id=booking.room_id)
        return booking_to_dict(booking)


def update_booking(booking_id: int, **fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("total_price",))
    reject_nulls(values, _REQUIRED + ("status",))
    with get_session() as session:
        booking = session.get(RoomBooking, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        for key, value in values.items():
            setattr(booking, key, value)
        _validate(session, booking)
        session.flush()
        # room/client relationships still point at the old rows after an id change
        session.refresh(booking)
        logger.info("bookings.update", booking_id=booking_id, fields=sorted(values))
        return booking_to_dict(booking)


def delete_booking(booking_id: int) -> None:
    with get_session() as session:
        booking = session.get(RoomBooking, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        session.delete(booking)
        logger.info("bookings.delete", booking_id=booking_id)
