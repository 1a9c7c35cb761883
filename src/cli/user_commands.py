"""User account commands.

Every HTTP user endpoint needs a bearer token, so the first account is
created here, directly against the database.
"""

import asyncio
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from src.cli.db_commands import DATABASE_URL_OPTION
from src.registry.core.constants import SYSTEM_USER, UserType
from src.registry.core.helpers import (
    FiltersMeta,
    SelectMetas,
    get_select_string,
    update_filters,
)
from src.registry.core.security import PasswordCipher
from src.registry.core.services import DbSessionService
from src.registry.entities import UserRepository
from src.registry.entities.core.repository import QueryOptions

console = Console()

users_app = typer.Typer(help="Manage registry user accounts")


async def create_user(database_url: str | None, record: dict[str, Any]) -> dict[str, Any]:
    database = DbSessionService(database_url)
    try:
        await database.create_all()
        return await UserRepository(database).add(record, SYSTEM_USER)
    finally:
        await database.dispose()


async def fetch_users(database_url: str | None, filters: dict[str, Any]) -> list[dict[str, Any]]:
    database = DbSessionService(database_url)
    select = get_select_string(SelectMetas.DEFAULT, SelectMetas.USERS)
    try:
        return await UserRepository(database).get_many(filters, QueryOptions(select=select))
    finally:
        await database.dispose()


@users_app.command("add")
def add_user(
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(..., "--password", "-p", help="Password"),
    full_name: str = typer.Option(..., "--full-name", "-n", help="Full name"),
    gender: str = typer.Option(..., "--gender", "-g", help="Gender"),
    phone_number: str = typer.Option(..., "--phone", help="10 digit phone number"),
    address: str | None = typer.Option(None, "--address", help="Postal address"),
    user_type: UserType = typer.Option(UserType.USER, "--type", "-t", help="Role on the platform"),
    database_url: str | None = DATABASE_URL_OPTION,
) -> None:
    """Create a user with an encrypted password."""
    record = {
        "fullName": full_name,
        "gender": gender,
        "phoneNumber": phone_number,
        "address": address,
        "email": email,
        "password": PasswordCipher().encrypt_string(password),
        "userType": user_type.value,
    }
    try:
        user = asyncio.run(create_user(database_url, record))
    except ValidationError as e:
        console.print("[red]❌ Invalid user details:[/red]")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  [red]{field}: {error['msg']}[/red]")
        raise typer.Exit(code=1) from e
    except Exception as e:
        console.print(f"[red]❌ Failed to create user: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created user {user['email']} ({user['_id']})[/green]")


@users_app.command("list")
def list_users(
    status: str | None = typer.Option(
        None, "--status", "-s", help="active, inactive or all (default active)"
    ),
    user_type: str | None = typer.Option(None, "--type", "-t", help="Filter by user type"),
    database_url: str | None = DATABASE_URL_OPTION,
) -> None:
    """List users in a table."""
    query: dict[str, Any] = {}
    if status:
        query["status"] = status
    if user_type:
        query["type"] = user_type
    filters = update_filters(query, FiltersMeta.USERS)

    try:
        users = asyncio.run(fetch_users(database_url, dict(filters)))
    except Exception as e:
        console.print(f"[red]❌ Failed to list users: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Registry users")
    table.add_column("ID", style="cyan")
    table.add_column("Full Name", style="magenta")
    table.add_column("Email", style="blue")
    table.add_column("Phone", style="white")
    table.add_column("Type", style="green")
    table.add_column("Status", style="yellow")

    for user in users:
        table.add_row(
            user.get("_id", ""),
            user.get("fullName", ""),
            user.get("email", ""),
            user.get("phoneNumber", ""),
            user.get("userType", ""),
            user.get("recStatus", ""),
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")
