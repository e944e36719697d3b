"""Garden bookings repository."""

from typing import Any, Optional

from sqlalchemy import or_, select

from backoffice.db import get_session
from backoffice.db.models.garden import GardenBooking
from backoffice.db.models.rooms import BOOKING_STATUSES
from backoffice.db.repositories.common import clean_fields, reject_nulls, require_values
from backoffice.errors import NotFoundError, ValidationError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity

logger = get_logger("backoffice.db.garden_repo")

_FIELDS = {
    "client_name",
    "client_contact",
    "booking_date",
    "start_time",
    "end_time",
    "number_of_guests",
    "purpose",
    "total_price",
    "status",
}
_REQUIRED = ("client_name", "booking_date", "start_time", "end_time")


def garden_booking_to_dict(booking: GardenBooking) -> dict[str, Any]:
    return {
        "id": booking.id,
        "client_name": booking.client_name,
        "client_contact": booking.client_contact,
        "booking_date": booking.booking_date.isoformat(),
        "start_time": booking.start_time.isoformat(timespec="minutes"),
        "end_time": booking.end_time.isoformat(timespec="minutes"),
        "number_of_guests": booking.number_of_guests,
        "purpose": booking.purpose,
        "total_price": format_quantity(booking.total_price),
        "status": booking.status,
    }


def _validate(booking: GardenBooking) -> None:
    if booking.end_time <= booking.start_time:
        raise ValidationError("end_time must be after start_time.", field="end_time")
    if booking.status not in BOOKING_STATUSES:
        raise ValidationError(f"Unknown booking status: {booking.status!r}", field="status")


def list_garden_bookings(search: Optional[str] = None, status: Optional[str] = None) -> list[dict[str, Any]]:
    """Newest date first, then by start time; `search` matches client name or purpose."""
    with get_session() as session:
        q = select(GardenBooking)
        if search:
            pattern = f"%{search}%"
            q = q.where(or_(GardenBooking.client_name.ilike(pattern), GardenBooking.purpose.ilike(pattern)))
        if status:
            q = q.where(GardenBooking.status == status)
        q = q.order_by(GardenBooking.booking_date.desc(), GardenBooking.start_time.asc())
        return [garden_booking_to_dict(b) for b in session.scalars(q).all()]


def create_garden_booking(**fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("total_price",))
    require_values(values, _REQUIRED)
    values.setdefault("status", "Pending")
    booking = GardenBooking(**values)
    _validate(booking)
    with get_session() as session:
        session.add(booking)
        session.flush()
        logger.info("garden_bookings.create", booking_id=booking.id, booking_date=booking.booking_date.isoformat())
        return garden_booking_to_dict(booking)


def update_garden_booking(booking_id: int, **fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("total_price",))
    reject_nulls(values, _REQUIRED + ("status",))
    with get_session() as session:
        booking = session.get(GardenBooking, booking_id)
        if booking is None:
            raise NotFoundError("Garden booking not found")
        for key, value in values.items():
            setattr(booking, key, value)
        _validate(booking)
        session.flush()
        logger.info("garden_bookings.update", booking_id=booking_id, fields=sorted(values))
        return garden_booking_to_dict(booking)


def delete_garden_booking(booking_id: int) -> dict[str, Any]:
    with get_session() as session:
        booking = session.get(GardenBooking, booking_id)
        if booking is None:
            raise NotFoundError("Garden booking not found")
        session.delete(booking)
    logger.info("garden_bookings.delete", booking_id=booking_id)
    return {"message": "Garden booking deleted successfully.", "id": booking_id}
