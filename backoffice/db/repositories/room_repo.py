"""Rooms and clients repository."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from backoffice.db import get_session
from backoffice.db.models.rooms import ROOM_STATUSES, Client, Room
from backoffice.db.repositories.common import clean_fields, reject_nulls, require_values
from backoffice.errors import ConflictError, NotFoundError, ReferencedDataError, ValidationError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity

logger = get_logger("backoffice.db.room_repo")

_ROOM_FIELDS = {"room_number", "type", "price_per_night", "status"}
_CLIENT_FIELDS = {"name", "email", "phone"}


def room_to_dict(room: Room) -> dict[str, Any]:
    return {
        "id": room.id,
        "room_number": room.room_number,
        "type": room.type,
        "price_per_night": format_quantity(room.price_per_night),
        "status": room.status,
    }


def client_to_dict(client: Client) -> dict[str, Any]:
    return {"id": client.id, "name": client.name, "email": client.email, "phone": client.phone}


def _check_status(values: dict[str, Any]) -> None:
    if "status" in values and values["status"] not in ROOM_STATUSES:
        raise ValidationError(f"Unknown room status: {values['status']!r}", field="status")


def list_rooms() -> list[dict[str, Any]]:
    with get_session() as session:
        return [room_to_dict(r) for r in session.scalars(select(Room).order_by(Room.id.asc())).all()]


def get_room(room_id: int) -> dict[str, Any]:
    with get_session() as session:
        room = session.get(Room, room_id)
        if room is None:
            raise NotFoundError("Room not found")
        return room_to_dict(room)


def create_room(**fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _ROOM_FIELDS, ("price_per_night",))
    require_values(values, ("room_number", "type", "price_per_night"))
    _check_status(values)
    with get_session() as session:
        room = Room(**values)
        session.add(room)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(f"Room {values['room_number']!r} already exists.") from e
        logger.info("rooms.create", room_id=room.id, room_number=room.room_number)
        return room_to_dict(room)


def update_room(room_id: int, **fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _ROOM_FIELDS, ("price_per_night",))
    reject_nulls(values, _ROOM_FIELDS)
    _check_status(values)
    with get_session() as session:
        room = session.get(Room, room_id)
        if room is None:
            raise NotFoundError("Room not found")
        for key, value in values.items():
            setattr(room, key, value)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(f"Room {values.get('room_number')!r} already exists.") from e
        logger.info("rooms.update", room_id=room_id, fields=sorted(values))
        return room_to_dict(room)


def delete_room(room_id: int) -> None:
    with get_session() as session:
        room = session.get(Room, room_id)
        if room is None:
            raise NotFoundError("Room not found")
        session.delete(room)
        try:
            session.flush()
        except IntegrityError as e:
            raise ReferencedDataError(f"Cannot delete room {room_id}: it has bookings.") from e
        logger.info("rooms.delete", room_id=room_id)


def list_clients() -> list[dict[str, Any]]:
    with get_session() as session:
        return [client_to_dict(c) for c in session.scalars(select(Client).order_by(Client.id.asc())).all()]


def create_client(**fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _CLIENT_FIELDS)
    require_values(values, ("name",))
    with get_session() as session:
        client = Client(**values)
        session.add(client)
        session.flush()
        logger.info("clients.create", client_id=client.id)
        return client_to_dict(client)
