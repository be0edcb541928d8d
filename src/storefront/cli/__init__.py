"""Main CLI application module."""

import typer

from .db_commands import init_db, seed
from .server_commands import serve

# Create the main CLI application
app = typer.Typer(
    help="🛍️  Storefront CLI - catalogue and server management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("init-db")(init_db)
app.command("seed")(seed)
app.command("serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
