"""CLI commands: one module per command (serve, init-db, create-user, show-day)."""

from typer import Typer

from backoffice.cli import db_commands, serve, show_day, users

app = Typer(help="Hospitality back office: inventory and daily stock reconciliation")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(serve.serve)
    app.command(name="init-db")(db_commands.init_database)
    app.command(name="create-user")(users.create_user)
    app.command(name="show-day")(show_day.show_day)


register_commands()
