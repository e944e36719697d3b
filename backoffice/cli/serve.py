"""Serve mode: run the FastAPI back-office API under uvicorn."""

import sys

import typer
import uvicorn

from backoffice.api.server import create_app
from backoffice.config import API_HOST, API_PORT
from backoffice.db import init_db

from .shared import console, logger


def serve(
    port: int = typer.Option(API_PORT, "--port", "-p", help="Port for the API server"),
    host: str = typer.Option(API_HOST, "--host", "-h", help="Bind host"),
    seed: bool = typer.Option(False, "--seed", help="Seed categories/inventory from data/*.csv if empty"),
) -> None:
    """Start the back-office API server."""
    init_db(seed=seed)
    log = logger.bind(command="serve", port=port)
    log.info("serve.start")

    app = create_app()
    console.print(f"[green]Starting back-office API on http://{host}:{port}[/green]")
    console.print("[dim]Endpoints: /api/daily-stock, /api/inventory, /api/menu-items, /api/rooms, /api/bookings/rooms, /api/garden-bookings, /api/reports/summary, /api/auth, GET /health[/dim]")
    try:
        uvicorn.run(app, host=host, port=port, log_level="info", timeout_graceful_shutdown=15)
    except KeyboardInterrupt:
        console.print("\n[dim]Shutting down...[/dim]")
        sys.exit(0)
