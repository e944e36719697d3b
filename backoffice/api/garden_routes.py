"""Garden bookings API: staff manage bookings, only admins delete them."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from backoffice.api.deps import require_admin, require_staff
from backoffice.auth.context import UserContext
from backoffice.db.repositories import garden_repo
from backoffice.models.garden import GardenBookingIn, GardenBookingUpdate

router = APIRouter(prefix="/api/garden-bookings", tags=["garden-bookings"])


@router.get("")
def list_garden_bookings(
    search: Optional[str] = Query(None, description="Client name or purpose"),
    status: Optional[str] = Query(None),
    _: UserContext = Depends(require_staff),
) -> list[dict[str, Any]]:
    return garden_repo.list_garden_bookings(search=search, status=status)


@router.post("", status_code=201)
def create_garden_booking(body: GardenBookingIn, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return garden_repo.create_garden_booking(**body.model_dump())


@router.put("/{booking_id}")
def update_garden_booking(
    booking_id: int,
    body: GardenBookingUpdate,
    _: UserContext = Depends(require_staff),
) -> dict[str, Any]:
    return garden_repo.update_garden_booking(booking_id, **body.model_dump(exclude_unset=True))


@router.delete("/{booking_id}")
def delete_garden_booking(booking_id: int, _: UserContext = Depends(require_admin)) -> dict[str, Any]:
    return garden_repo.delete_garden_booking(booking_id)
