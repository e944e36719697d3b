"""Database commands: create tables, optionally seed from CSV."""

import typer

from backoffice.config import DATABASE_URL
from backoffice.db import init_db

from .shared import console, logger


def init_database(
    seed: bool = typer.Option(False, "--seed", help="Seed categories/inventory from data/*.csv if empty"),
) -> None:
    """Create all tables (idempotent)."""
    log = logger.bind(command="init-db")
    init_db(seed=seed)
    # never echo credentials from the URL
    console.print(f"[green]Database ready[/green] [dim]({DATABASE_URL.split('@')[-1]})[/dim]")
    log.info("init_db.done", seed=seed)
