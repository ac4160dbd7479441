"""User management CLI commands.

Commands go through UserService, so the CLI enforces the same rules as
the HTTP API.
"""

import asyncio

import typer
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from src.users_api.core.exceptions import UserServiceError
from src.users_api.core.models.user_dto import CreateUserDto, UpdateUserDto, UserDto

from . import utils
from .utils import console

# Create the users subcommand app
users_app = typer.Typer(help="Manage user records in the configured database")


def _print_user(user: UserDto, title: str) -> None:
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("ID", user.id)
    table.add_row("First Name", user.first_name)
    table.add_row("Last Name", user.last_name)
    table.add_row("Email", user.email)
    console.print(table)


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]❌ {escape(message)}[/red]")
    return typer.Exit(code=1)


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    with utils.open_user_service() as service:
        users = asyncio.run(service.get_all())

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Email", style="blue")
    for user in users:
        table.add_row(user.id, user.first_name, user.last_name, user.email)

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("show")
def show_user(user_id: str = typer.Argument(..., help="ID of the user")) -> None:
    """Show a single user."""
    with utils.open_user_service() as service:
        user = asyncio.run(service.get_by_id(user_id))

    if user is None:
        raise _fail(f"User '{user_id}' not found")
    _print_user(user, f"User {user_id}")


@users_app.command("add")
def add_user(
    first_name: str = typer.Option(..., "--first-name", "-f", help="First name"),
    last_name: str = typer.Option(..., "--last-name", "-l", help="Last name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
) -> None:
    """Add a new user."""
    try:
        dto = CreateUserDto(first_name=first_name, last_name=last_name, email=email)
    except ValueError as e:
        raise _fail(f"Invalid user data: {e}") from e

    with utils.open_user_service() as service:
        try:
            user = asyncio.run(service.create(dto))
        except UserServiceError as e:
            raise _fail(e.message) from e

    console.print(f"[green]✅ Created user {user.id}[/green]")
    _print_user(user, "New user")


@users_app.command("update")
def update_user(
    user_id: str = typer.Argument(..., help="ID of the user"),
    first_name: str = typer.Option(..., "--first-name", "-f", help="First name"),
    last_name: str = typer.Option(..., "--last-name", "-l", help="Last name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
) -> None:
    """Replace the names and email of a user."""
    try:
        dto = UpdateUserDto(first_name=first_name, last_name=last_name, email=email)
    except ValueError as e:
        raise _fail(f"Invalid user data: {e}") from e

    with utils.open_user_service() as service:
        try:
            user = asyncio.run(service.update(user_id, dto))
        except UserServiceError as e:
            raise _fail(e.message) from e

    if user is None:
        raise _fail(f"User '{user_id}' not found")
    console.print(f"[green]✅ Updated user {user.id}[/green]")
    _print_user(user, "Updated user")


@users_app.command("delete")
def delete_user(
    user_id: str = typer.Argument(..., help="ID of the user to delete"),
    force: bool = typer.Option(False, "--force", help="Skip confirmation prompt"),
) -> None:
    """Delete a user."""
    if not force and not Confirm.ask(f"Are you sure you want to delete user '{user_id}'?"):
        console.print("[yellow]Deletion cancelled[/yellow]")
        return

    with utils.open_user_service() as service:
        deleted = asyncio.run(service.delete(user_id))

    if not deleted:
        raise _fail(f"User '{user_id}' not found")
    console.print(f"[green]✅ Deleted user {user_id}[/green]")
