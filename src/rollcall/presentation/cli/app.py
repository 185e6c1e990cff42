"""Rollcall CLI application using Typer.

Operator utilities: secret generation for deployment configuration,
provisioning of department-head identities and schema creation.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from rollcall.domain.shared.exceptions import DomainException
from rollcall_config.settings import Settings, get_settings
from rollcall_identity.domain.account import HeadIdentifierAlreadyExistsError
from rollcall_identity.domain.head_identity import HeadIdentity
from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    HeadIdentityRepositorySQLAlchemy,
    build_engine,
    build_session_maker,
    create_tables,
)

app = typer.Typer(
    name="rollcall",
    help="Rollcall - identity and access control CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
identities_app = typer.Typer(
    name="identities",
    help="Department-head identity provisioning",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(identities_app)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for rollcall configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing bearer tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Rollcall Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _provision_identity(settings: Settings, identity: HeadIdentity) -> None:
    engine = build_engine(settings.database_url)
    try:
        await create_tables(engine)
        async with build_session_maker(engine)() as session:
            accounts = AccountRepositorySQLAlchemy(session)
            if await accounts.find_head_by_identifier(identity.head_identifier):
                raise HeadIdentifierAlreadyExistsError(identity.head_identifier)
            await HeadIdentityRepositorySQLAlchemy(session).add(identity)
            await session.commit()
    finally:
        await engine.dispose()


@identities_app.command("provision")
def provision_identity(
    head_identifier: str = typer.Argument(..., help="e.g. HOD_CS_001"),
    name: str = typer.Option(..., "--name", "-n", help="The head's name"),
    department: str = typer.Option(..., "--department", "-d", help="Department"),
) -> None:
    """Seed an unregistered department-head identity.

    The head can then register with this identifier and department.
    """
    try:
        identity = HeadIdentity.provision(head_identifier, name, department)
        asyncio.run(_provision_identity(get_settings(), identity))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]Provisioned[/green] {identity.head_identifier} "
        f"({identity.name}, {identity.department})"
    )


async def _init_database(settings: Settings) -> None:
    engine = build_engine(settings.database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_database() -> None:
    """Create all database tables (idempotent)."""
    settings = get_settings()
    database_url = settings.database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    console.print(f"Database: {db_display}")

    asyncio.run(_init_database(settings))
    console.print("[green]Database schema is up to date[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
