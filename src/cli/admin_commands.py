"""Admin account CLI commands."""

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from src.storefront.core.security import hash_password
from src.storefront.core.services.database import DbManageService, DbSessionService
from src.storefront.entities.user import UserRepository

console = Console()

admin_app = typer.Typer(help="Manage admin accounts")


def get_database_service() -> DbSessionService:
    """Database service with the schema in place."""
    database_service = DbSessionService()
    DbManageService(database_service).create_all()
    return database_service


@admin_app.command("create")
def create_admin(
    username: str = typer.Argument(..., help="Admin username"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Admin password",
    ),
    role: str = typer.Option("admin", "--role", "-r", help="Account role"),
) -> None:
    """Create an admin account, or reset the password of an existing one."""
    if not password:
        console.print("[red]❌ Password must not be empty[/red]")
        raise typer.Exit(code=1)

    try:
        with get_database_service().session_scope() as session:
            user = UserRepository(session).create_or_replace(
                username, hash_password(password), role
            )
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create admin: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Admin '{user.username}' saved (id {user.id})[/green]")


@admin_app.command("list")
def list_admins() -> None:
    """List admin accounts."""
    with get_database_service().session_scope() as session:
        users = UserRepository(session).list_all()

    if not users:
        console.print("[yellow]No admin accounts found[/yellow]")
        return

    table = Table(title="Admin accounts")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Role", style="magenta")
    table.add_column("Created", style="blue")

    for user in users:
        table.add_row(
            str(user.id),
            user.username,
            user.role,
            user.created_at.isoformat(sep=" ", timespec="seconds") if user.created_at else "",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} admin accounts[/green]")
