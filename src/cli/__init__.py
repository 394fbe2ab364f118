"""Main CLI application module."""

import typer

from .admin_commands import admin_app
from .db_commands import db_app

# Create the main CLI application
app = typer.Typer(
    help="Storefront admin backend - operator commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(db_app, name="db")
app.add_typer(admin_app, name="admin")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
