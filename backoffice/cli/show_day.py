"""Show one day's stock reconciliation as a table."""

from datetime import date

import typer
from rich.table import Table

from backoffice.errors import BackofficeError
from backoffice.services import daily_stock

from .shared import CLI_ADMIN, console, logger


def show_day(
    record_date: str = typer.Argument(..., help="Record date (YYYY-MM-DD)"),
) -> None:
    """Print the line items, calculated closing stock and variance for one date."""
    log = logger.bind(command="show-day", record_date=record_date)
    try:
        day = date.fromisoformat(record_date)
    except ValueError as e:
        console.print(f"[red]Invalid date: {record_date!r}[/red]")
        raise typer.Exit(1) from e

    try:
        records = daily_stock.list_records(CLI_ADMIN, date_filter=day)
        if not records:
            console.print(f"[yellow]No daily stock record for {day.isoformat()}[/yellow]")
            raise typer.Exit(1)
        record = daily_stock.get_record(CLI_ADMIN, records[0]["id"])
    except BackofficeError as e:
        console.print(f"[red]{e.message}[/red]")
        log.error("show_day.fail", error=e.message)
        raise typer.Exit(1) from e

    status = "finalized" if record["is_finalized"] else "open"
    table = Table(title=f"Daily stock {record['record_date']} ({status})")
    table.add_column("Item", style="cyan")
    table.add_column("Unit")
    for col in ("Opening", "Received", "Sold", "Wasted", "Calculated", "Actual", "Variance"):
        table.add_column(col, justify="right")

    for item in record["items"]:
        variance = item["variance"]
        style = "red" if variance.startswith("-") else ("green" if variance != "0.00" else "")
        table.add_row(
            item["inventory_item_name"] or str(item["inventory_item_id"]),
            item["inventory_item_unit"] or "",
            item["opening_stock"],
            item["items_received"],
            item["items_sold_manual"],
            item["items_taken_wasted"],
            item["closing_stock_calculated"],
            item["closing_stock_actual"],
            f"[{style}]{variance}[/{style}]" if style else variance,
        )
    console.print(table)
    if record.get("notes"):
        console.print(f"[dim]Notes: {record['notes']}[/dim]")
    log.info("show_day.done", items=len(record["items"]))
