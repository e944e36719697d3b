"""Shared CLI helpers: console, logger, CLI caller context."""

from rich.console import Console

from backoffice.auth.context import Role, UserContext
from backoffice.utils.logger import get_logger

console = Console()
logger = get_logger("backoffice.cli")

# Operator running commands on the server host acts with admin rights.
CLI_ADMIN = UserContext(user_id=None, username="cli", role=Role.ADMIN.value)
