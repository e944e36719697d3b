"""Daily stock API: open a day, edit its lines, finalize, delete."""

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from backoffice.api.deps import get_auth_context
from backoffice.auth.context import UserContext
from backoffice.models.daily_stock import RecordCreate, RecordUpdate
from backoffice.services import daily_stock

router = APIRouter(prefix="/api/daily-stock", tags=["daily-stock"])


@router.get("")
def list_daily_stock_records(
    date_filter: Optional[date] = Query(None, description="Exact record date (YYYY-MM-DD)"),
    auth: UserContext = Depends(get_auth_context),
) -> list[dict[str, Any]]:
    """List records (no line items), newest first."""
    return daily_stock.list_records(auth, date_filter=date_filter)


@router.post("", status_code=201)
def create_daily_stock_record(
    body: RecordCreate,
    auth: UserContext = Depends(get_auth_context),
) -> dict[str, Any]:
    """Open a day; lines for every active inventory item are created with carried-forward opening stock."""
    return daily_stock.create_record(auth, body.record_date, notes=body.notes)


@router.get("/items/{item_id}")
def get_daily_stock_item(item_id: int, auth: UserContext = Depends(get_auth_context)) -> dict[str, Any]:
    return daily_stock.get_item_detail(auth, item_id)


@router.get("/{record_id}")
def get_daily_stock_record(record_id: int, auth: UserContext = Depends(get_auth_context)) -> dict[str, Any]:
    """Record with its line items ordered by inventory item name."""
    return daily_stock.get_record(auth, record_id)


@router.put("/{record_id}/items")
def batch_update_daily_stock_items(
    record_id: int,
    payloads: Any = Body(...),
    auth: UserContext = Depends(get_auth_context),
) -> list[dict[str, Any]]:
    """All-or-nothing upsert of line items; derived fields are recomputed server-side."""
    return daily_stock.batch_update_items(auth, record_id, payloads)


@router.put("/{record_id}")
def update_daily_stock_record(
    record_id: int,
    body: RecordUpdate,
    auth: UserContext = Depends(get_auth_context),
) -> dict[str, Any]:
    """Update notes and/or is_finalized; only fields present in the body are applied."""
    return daily_stock.update_record(auth, record_id, **body.model_dump(exclude_unset=True))


@router.delete("/{record_id}")
def delete_daily_stock_record(record_id: int, auth: UserContext = Depends(get_auth_context)) -> dict[str, Any]:
    return daily_stock.delete_record(auth, record_id)
