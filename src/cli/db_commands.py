"""Database management CLI commands."""

import typer
from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError

from src.storefront.runtime.init_db import init_db

console = Console()

db_app = typer.Typer(help="Manage the storefront database")


@db_app.command("init")
def init() -> None:
    """Create tables, seed default settings and the configured admin."""
    try:
        init_db()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Database initialization failed: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Database initialized[/green]")
