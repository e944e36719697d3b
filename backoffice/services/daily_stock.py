"""Daily stock reconciliation: open a day with carried-forward balances, batch-edit lines, finalize.

Every operation takes an AuthorizationContext and runs inside one get_session() scope, so
create-with-items and batch updates commit or roll back as a unit.

Line item arithmetic:
    closing_stock_calculated = opening_stock + items_received - items_sold_manual - items_taken_wasted
    variance                 = closing_stock_actual - closing_stock_calculated
"""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backoffice.auth.context import AuthorizationContext, Role
from backoffice.db import get_session
from backoffice.db.base import utcnow
from backoffice.db.models.daily_stock import DailyStockItemDetail, DailyStockRecord
from backoffice.db.models.inventory import InventoryItem
from backoffice.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from backoffice.models.daily_stock import QUANTITY_FIELDS, StockItemPayload
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import ZERO, format_quantity, to_decimal

logger = get_logger("backoffice.services.daily_stock")

RECORD_NOT_FOUND = "Daily stock record not found."
_UPDATABLE_RECORD_FIELDS = {"notes", "is_finalized"}


def calculate_stock_details(
    opening_stock: Any,
    items_received: Any,
    items_sold_manual: Any,
    items_taken_wasted: Any,
    closing_stock_actual: Any,
) -> tuple[Decimal, Decimal]:
    """Return (closing_stock_calculated, variance) as 2-place Decimals."""
    calculated = (
        to_decimal(opening_stock)
        + to_decimal(items_received)
        - to_decimal(items_sold_manual)
        - to_decimal(items_taken_wasted)
    )
    variance = to_decimal(closing_stock_actual) - calculated
    return to_decimal(calculated), to_decimal(variance)


# ---- serialization ----


def record_to_dict(record: DailyStockRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "record_date": record.record_date.isoformat(),
        "recorded_by_user_id": record.recorded_by_user_id,
        "notes": record.notes,
        "is_finalized": record.is_finalized,
        "created_at": record.created_at.isoformat() if record.created_at else None,
        "updated_at": record.updated_at.isoformat() if record.updated_at else None,
    }


def item_to_dict(item: DailyStockItemDetail) -> dict[str, Any]:
    inventory = item.inventory_item
    return {
        "id": item.id,
        "daily_record_id": item.daily_record_id,
        "inventory_item_id": item.inventory_item_id,
        "inventory_item_name": inventory.name if inventory else None,
        "inventory_item_unit": inventory.unit if inventory else None,
        "opening_stock": format_quantity(item.opening_stock),
        "items_received": format_quantity(item.items_received),
        "items_taken_wasted": format_quantity(item.items_taken_wasted),
        "items_sold_manual": format_quantity(item.items_sold_manual),
        "closing_stock_actual": format_quantity(item.closing_stock_actual),
        "closing_stock_calculated": format_quantity(item.closing_stock_calculated),
        "variance": format_quantity(item.variance),
    }


# ---- helpers ----


def _require_any_role(auth: AuthorizationContext, roles: Iterable[Role], action: str) -> None:
    roles = list(roles)
    if not any(auth.has_role(r) for r in roles):
        allowed = " or ".join(r.value for r in roles)
        logger.warning("daily_stock.forbidden", action=action, user_id=auth.user_id, required=allowed)
        raise ForbiddenError(f"Forbidden: only {allowed} users can {action}.")


def _require_staff(auth: AuthorizationContext, action: str) -> None:
    _require_any_role(auth, (Role.ADMIN, Role.STAFF), action)


def _load_record(session: Session, record_id: int) -> DailyStockRecord:
    record = session.get(DailyStockRecord, record_id)
    if record is None:
        raise NotFoundError(RECORD_NOT_FOUND)
    return record


def _check_not_locked(auth: AuthorizationContext, record: DailyStockRecord) -> None:
    """Finalized records only accept changes from admins."""
    if record.is_finalized and not auth.has_role(Role.ADMIN):
        raise ForbiddenError(
            f"Forbidden: the daily stock record for {record.record_date.isoformat()} is finalized; "
            "only administrators can modify it."
        )


def previous_closing_stock(session: Session, inventory_item_id: int, before: date) -> Decimal:
    """closing_stock_actual of the item's line in the latest record dated strictly before `before`; 0 if none."""
    q = (
        select(DailyStockItemDetail.closing_stock_actual)
        .join(DailyStockRecord, DailyStockRecord.id == DailyStockItemDetail.daily_record_id)
        .where(DailyStockRecord.record_date < before)
        .where(DailyStockItemDetail.inventory_item_id == inventory_item_id)
        .order_by(DailyStockRecord.record_date.desc())
        .limit(1)
    )
    value = session.scalars(q).first()
    return to_decimal(value) if value is not None else ZERO


def find_record_id_for_date(session: Session, record_date: date) -> Optional[int]:
    return session.scalars(select(DailyStockRecord.id).where(DailyStockRecord.record_date == record_date)).first()


def _parse_payload(index: int, raw: Any) -> StockItemPayload:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Item {index} must be an object.", field=f"items[{index}]")
    try:
        return StockItemPayload.model_validate(raw)
    except PydanticValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or None
        if err.get("type") == "missing":
            message = f"Missing required field '{field}' for daily stock item {index}."
        else:
            message = f"Invalid value for '{field}' in daily stock item {index}: {err.get('msg')}"
        raise ValidationError(message, field=field) from e


# ---- operations ----


def list_records(auth: AuthorizationContext, date_filter: Optional[date] = None) -> list[dict[str, Any]]:
    """Records only (no items), newest date first."""
    _require_staff(auth, "view daily stock records")
    with get_session() as session:
        q = select(DailyStockRecord)
        if date_filter is not None:
            q = q.where(DailyStockRecord.record_date == date_filter)
        q = q.order_by(DailyStockRecord.record_date.desc(), DailyStockRecord.created_at.desc())
        return [record_to_dict(r) for r in session.scalars(q).all()]


def get_record(auth: AuthorizationContext, record_id: int) -> dict[str, Any]:
    """Record plus its line items ordered by inventory item name."""
    _require_staff(auth, "view daily stock records")
    with get_session() as session:
        record = _load_record(session, record_id)
        q = (
            select(DailyStockItemDetail)
            .join(InventoryItem, InventoryItem.id == DailyStockItemDetail.inventory_item_id)
            .where(DailyStockItemDetail.daily_record_id == record_id)
            .order_by(InventoryItem.name.asc(), DailyStockItemDetail.id.asc())
        )
        out = record_to_dict(record)
        out["items"] = [item_to_dict(i) for i in session.scalars(q).unique().all()]
        return out


def get_item_detail(auth: AuthorizationContext, item_id: int) -> dict[str, Any]:
    _require_staff(auth, "view daily stock records")
    with get_session() as session:
        item = session.get(DailyStockItemDetail, item_id)
        if item is None:
            raise NotFoundError("Daily stock item not found.")
        return item_to_dict(item)


def create_record(
    auth: AuthorizationContext,
    record_date: date,
    notes: Optional[str] = None,
) -> dict[str, Any]:
    """Open a day: insert the record and one line per active inventory item in a single transaction.

    Opening stock carries forward from the item's closing_stock_actual in the most recent earlier
    record (0 when there is none); closing_stock_actual starts equal to the opening stock.
    """
    _require_staff(auth, "create daily stock records")
    if record_date is None:
        raise ValidationError("record_date is required.", field="record_date")
    log = logger.bind(record_date=record_date.isoformat(), user_id=auth.user_id)

    with get_session() as session:
        if find_record_id_for_date(session, record_date) is not None:
            raise ConflictError(f"A daily stock record for {record_date.isoformat()} already exists.")

        record = DailyStockRecord(
            record_date=record_date,
            notes=notes,
            recorded_by_user_id=auth.user_id,
            is_finalized=False,
        )
        session.add(record)
        try:
            session.flush()
        except IntegrityError as e:
            # lost a race with another create for the same date
            raise ConflictError(f"A daily stock record for {record_date.isoformat()} already exists.") from e

        active_items = session.scalars(
            select(InventoryItem).where(InventoryItem.is_active.is_(True)).order_by(InventoryItem.name.asc())
        ).all()
        for inventory_item in active_items:
            opening = previous_closing_stock(session, inventory_item.id, record_date)
            calculated, variance = calculate_stock_details(opening, ZERO, ZERO, ZERO, opening)
            session.add(
                DailyStockItemDetail(
                    daily_record_id=record.id,
                    inventory_item_id=inventory_item.id,
                    opening_stock=opening,
                    items_received=ZERO,
                    items_taken_wasted=ZERO,
                    items_sold_manual=ZERO,
                    closing_stock_actual=opening,
                    closing_stock_calculated=calculated,
                    variance=variance,
                )
            )
        session.flush()
        log.info("daily_stock.create.done", record_id=record.id, items=len(active_items))
        return record_to_dict(record)


def batch_update_items(
    auth: AuthorizationContext,
    record_id: int,
    payloads: Any,
) -> list[dict[str, Any]]:
    """Update or insert line items of one record atomically; returns them in input order.

    Every payload is validated before anything is written. Updates match on id AND
    daily_record_id; a payload without id inserts a line for an inventory item not yet
    in the record. Derived fields are always recomputed here.
    """
    _require_staff(auth, "update daily stock item details")
    if not isinstance(payloads, list) or not payloads:
        raise ValidationError("Array of item details is required for batch update.", field="items")

    parsed = [_parse_payload(i, raw) for i, raw in enumerate(payloads)]
    for i, p in enumerate(parsed):
        if p.daily_record_id != record_id:
            raise ValidationError(
                f"Daily stock item {i} belongs to record {p.daily_record_id}, not {record_id}.",
                field="daily_record_id",
            )

    log = logger.bind(record_id=record_id, user_id=auth.user_id, count=len(parsed))
    with get_session() as session:
        record = _load_record(session, record_id)
        _check_not_locked(auth, record)

        touched: list[DailyStockItemDetail] = []
        for i, p in enumerate(parsed):
            try:
                calculated, variance = calculate_stock_details(
                    p.opening_stock,
                    p.items_received,
                    p.items_sold_manual,
                    p.items_taken_wasted,
                    p.closing_stock_actual,
                )
            except ValueError as e:
                raise ValidationError(f"Daily stock item {i}: {e}", field="closing_stock_calculated") from e
            if p.id is not None:
                item = session.scalars(
                    select(DailyStockItemDetail)
                    .where(DailyStockItemDetail.id == p.id)
                    .where(DailyStockItemDetail.daily_record_id == p.daily_record_id)
                ).first()
                if item is None:
                    raise NotFoundError(f"Daily stock item {p.id} not found in record {record_id}.")
            else:
                if session.get(InventoryItem, p.inventory_item_id) is None:
                    raise NotFoundError(f"Inventory item {p.inventory_item_id} not found.")
                item = DailyStockItemDetail(daily_record_id=record_id, inventory_item_id=p.inventory_item_id)
                session.add(item)

            for field in QUANTITY_FIELDS:
                setattr(item, field, to_decimal(getattr(p, field)))
            item.closing_stock_calculated = calculated
            item.variance = variance
            touched.append(item)

        record.updated_at = utcnow()
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(
                f"Daily stock record {record_id} already has a line for one of the submitted inventory items."
            ) from e
        log.info("daily_stock.items.updated")
        return [item_to_dict(i) for i in touched]


def update_record(auth: AuthorizationContext, record_id: int, **changes: Any) -> dict[str, Any]:
    """Apply notes / is_finalized. Finalizing is admin-only; a finalized record is admin-only."""
    _require_staff(auth, "update daily stock records")
    updates = {k: v for k, v in changes.items() if k in _UPDATABLE_RECORD_FIELDS}
    if not updates:
        raise ValidationError("No fields provided for update.")
    if "is_finalized" in updates and not isinstance(updates["is_finalized"], bool):
        raise ValidationError("is_finalized must be a boolean.", field="is_finalized")
    if updates.get("is_finalized") is True and not auth.has_role(Role.ADMIN):
        logger.warning("daily_stock.finalize.forbidden", record_id=record_id, user_id=auth.user_id)
        raise ForbiddenError("Forbidden: only administrators can finalize daily stock records.")

    with get_session() as session:
        record = _load_record(session, record_id)
        _check_not_locked(auth, record)
        for key, value in updates.items():
            setattr(record, key, value)
        session.flush()
        logger.info(
            "daily_stock.record.updated",
            record_id=record_id,
            user_id=auth.user_id,
            fields=sorted(updates),
            is_finalized=record.is_finalized,
        )
        return record_to_dict(record)


def delete_record(auth: AuthorizationContext, record_id: int) -> dict[str, Any]:
    """Delete a record and, by cascade, all its line items. Admin only."""
    _require_any_role(auth, (Role.ADMIN,), "delete daily stock records")
    with get_session() as session:
        record = _load_record(session, record_id)
        session.delete(record)
        session.flush()
    logger.info("daily_stock.record.deleted", record_id=record_id, user_id=auth.user_id)
    return {"message": "Daily stock record and its details deleted successfully.", "id": record_id}
