"""User commands: bootstrap accounts from the command line."""

import typer

from backoffice.auth.context import Role
from backoffice.db.repositories import user_repo
from backoffice.errors import BackofficeError

from .shared import console, logger


def create_user(
    username: str = typer.Argument(..., help="Login name"),
    role: Role = typer.Option(Role.ADMIN, "--role", "-r", help="admin or staff"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create a user (admin by default). Use this to bootstrap the first administrator."""
    log = logger.bind(command="create-user", username=username, role=role.value)
    try:
        user = user_repo.create_user(username, password, role)
    except BackofficeError as e:
        console.print(f"[red]{e.message}[/red]")
        log.warning("create_user.fail", error=e.message)
        raise typer.Exit(1) from e
    console.print(f"[green]Created {user['role']} user {user['username']!r} (id {user['id']})[/green]")
    log.info("create_user.done", user_id=user["id"])
