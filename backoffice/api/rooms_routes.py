"""Rooms, clients and room bookings API. Any admin or staff user may manage them."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Response

from backoffice.api.deps import require_staff
from backoffice.auth.context import UserContext
from backoffice.db.repositories import booking_repo, room_repo
from backoffice.models.rooms import ClientIn, RoomBookingIn, RoomBookingUpdate, RoomIn, RoomUpdate

router = APIRouter(prefix="/api", tags=["rooms"])


@router.get("/rooms")
def list_rooms(_: UserContext = Depends(require_staff)) -> list[dict[str, Any]]:
    return room_repo.list_rooms()


@router.get("/rooms/{room_id}")
def get_room(room_id: int, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return room_repo.get_room(room_id)


@router.post("/rooms", status_code=201)
def create_room(body: RoomIn, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return room_repo.create_room(**body.model_dump())


@router.put("/rooms/{room_id}")
def update_room(room_id: int, body: RoomUpdate, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return room_repo.update_room(room_id, **body.model_dump(exclude_unset=True))


@router.delete("/rooms/{room_id}", status_code=204)
def delete_room(room_id: int, _: UserContext = Depends(require_staff)) -> Response:
    room_repo.delete_room(room_id)
    return Response(status_code=204)


@router.get("/clients")
def list_clients(_: UserContext = Depends(require_staff)) -> list[dict[str, Any]]:
    return room_repo.list_clients()


@router.post("/clients", status_code=201)
def create_client(body: ClientIn, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return room_repo.create_client(**body.model_dump())


@router.get("/bookings/rooms")
def list_room_bookings(
    search: Optional[str] = Query(None, description="Room number or client name"),
    status: Optional[str] = Query(None),
    _: UserContext = Depends(require_staff),
) -> list[dict[str, Any]]:
    return booking_repo.list_bookings(search=search, status=status)


@router.get("/bookings/rooms/{booking_id}")
def get_room_booking(booking_id: int, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    return booking_repo.get_booking(booking_id)


@router.post("/bookings/rooms", status_code=201)
def create_room_booking(body: RoomBookingIn, _: UserContext = Depends(require_staff)) -> dict[str, Any]:
    """total_price is computed from the room rate when omitted."""
    return booking_repo.create_booking(**body.model_dump())


@router.put("/bookings/rooms/{booking_id}")
def update_room_booking(
    booking_id: int,
    body: RoomBookingUpdate,
    _: UserContext = Depends(require_staff),
) -> dict[str, Any]:
    return booking_repo.update_booking(booking_id, **body.model_dump(exclude_unset=True))


@router.delete("/bookings/rooms/{booking_id}", status_code=204)
def delete_room_booking(booking_id: int, _: UserContext = Depends(require_staff)) -> Response:
    booking_repo.delete_booking(booking_id)
    return Response(status_code=204)
