"""Dashboard summary: revenue from completed room bookings, bookings per room type, room status counts."""

from typing import Any

from sqlalchemy import func, select

from backoffice.auth.context import AuthorizationContext, Role
from backoffice.db import get_session
from backoffice.db.models.rooms import ROOM_STATUSES, Room, RoomBooking
from backoffice.errors import ForbiddenError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity

logger = get_logger("backoffice.services.reports")

REVENUE_STATUS = "Completed"


def summary(auth: AuthorizationContext) -> dict[str, Any]:
    if not (auth.has_role(Role.ADMIN) or auth.has_role(Role.STAFF)):
        raise ForbiddenError("Forbidden: only admin or staff users can view reports.")

    with get_session() as session:
        revenue = session.scalar(
            select(func.coalesce(func.sum(RoomBooking.total_price), 0)).where(RoomBooking.status == REVENUE_STATUS)
        )
        booking_count = func.count(RoomBooking.id)
        per_type = session.execute(
            select(Room.type, booking_count)
            .join(RoomBooking, RoomBooking.room_id == Room.id)
            .group_by(Room.type)
            .order_by(booking_count.desc(), Room.type.asc())
        ).all()
        statuses = session.execute(select(Room.status, func.count(Room.id)).group_by(Room.status)).all()

    # every known status is reported, even with zero rooms
    status_summary = {s: 0 for s in ROOM_STATUSES}
    status_summary.update({status: count for status, count in statuses})
    out = {
        "total_revenue": format_quantity(revenue),
        "room_type_bookings": [{"room_type": t, "booking_count": n} for t, n in per_type],
        "room_status_summary": status_summary,
    }
    logger.info("reports.summary", user_id=auth.user_id, room_types=len(per_type))
    return out
