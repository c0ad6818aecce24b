#!/usr/bin/env python3
"""
Main CLI entry point for the Ecosystem API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from ecosystem_api import __version__
from ecosystem_api.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="ecosystem-api")
def cli() -> None:
    """Ecosystem API CLI - manage server, database and users."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--memory",
    is_flag=True,
    default=False,
    help="Serve an empty in-memory store instead of the database",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, memory: bool, log_level: str) -> None:
    """Start the Ecosystem API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Ecosystem API server",
        host=host,
        port=port,
        reload=reload,
        memory=memory,
        log_level=log_level,
    )

    # Settings are read at import time by the app module
    if log_level == "debug":
        os.environ["ECOSYSTEM_DEBUG"] = "true"
        os.environ["ECOSYSTEM_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("ECOSYSTEM_DEBUG", "false")
        os.environ.setdefault("ECOSYSTEM_LOG_LEVEL", log_level)

    if memory and reload:
        raise click.UsageError("--memory cannot be combined with --reload")

    try:
        if reload:
            uvicorn.run(
                "ecosystem_api.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
            return

        if memory:
            from ecosystem_api.api.app import create_app
            from ecosystem_api.store import InMemoryRecordStore

            app = create_app(store=InMemoryRecordStore())
        else:
            from ecosystem_api.api.app import app

        uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Database URL (default: from settings)")
def init_db(database_url: str | None) -> None:
    """Create every table that does not exist yet."""
    from ecosystem_api.database.connection import (
        create_tables,
        init_database,
        test_database_connection,
    )

    async def do_init():
        init_database(database_url, force_reinit=database_url is not None)
        ok, error = await test_database_connection()
        if not ok:
            click.echo(f"✗ {error}", err=True)
            sys.exit(1)
        await create_tables()
        click.echo("✓ Database tables created")

    asyncio.run(do_init())


@cli.command("create-admin")
@click.option("--user-name", required=True, help="Name the user logs in with")
@click.option("--cu-id", type=int, default=None, help="Core unit the user belongs to")
@click.password_option(help="Password for the new user")
def create_admin(user_name: str, cu_id: int | None, password: str) -> None:
    """Create a user allowed to manage the system (first user bootstrap)."""
    from sqlalchemy import select

    from ecosystem_api.auth.gate import CORE_UNIT, MANAGE, SYSTEM
    from ecosystem_api.auth.passwords import hash_password
    from ecosystem_api.database.connection import get_async_session
    from ecosystem_api.database.models import UserPermissions, UserRoles, Users

    async def do_create():
        async with get_async_session() as session:
            existing = await session.execute(select(Users).where(Users.user_name == user_name))
            if existing.scalar_one_or_none() is not None:
                click.echo(f"✗ User '{user_name}' already exists", err=True)
                sys.exit(1)

            user = Users(user_name=user_name, password=await hash_password(password))
            session.add(user)
            await session.flush()

            session.add(UserPermissions(user_id=user.id, resource=SYSTEM, permission=MANAGE))
            if cu_id is not None:
                session.add(UserRoles(user_id=user.id, resource=CORE_UNIT, resource_id=cu_id))

        click.echo(f"✓ Admin user created: {user_name}")

    asyncio.run(do_create())


@cli.command("hash-password")
@click.password_option(help="Password to hash")
@click.option("--rounds", type=int, default=None, help="bcrypt cost factor (default: settings)")
def hash_password_command(password: str, rounds: int | None) -> None:
    """Print the bcrypt hash of a password."""
    from ecosystem_api.auth.passwords import hash_password

    click.echo(asyncio.run(hash_password(password, rounds)))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
