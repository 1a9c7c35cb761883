"""Database administration commands."""

import asyncio

import typer
from rich.console import Console

from src.registry.core.services import DbSessionService
from src.registry.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="Manage the registry database")

DATABASE_URL_OPTION = typer.Option(
    None, "--database-url", "-d", help="Override the configured database URL"
)


async def initialize_database(database_url: str | None) -> None:
    database = DbSessionService(database_url)
    try:
        await database.create_all()
    finally:
        await database.dispose()


@db_app.command("init")
def init_db(database_url: str | None = DATABASE_URL_OPTION) -> None:
    """Create the users and institutes tables if they do not exist."""
    url = database_url or get_config().database.url
    try:
        asyncio.run(initialize_database(database_url))
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]✅ Database ready at {url}[/green]")
