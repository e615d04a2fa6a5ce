"""Alembic migration environment (async engine).

The connection URL is taken from ``claimdesk.core.config.settings`` so that
migrations and the application always target the same database. Pass
``-x url=...`` to migrate a different database without touching the
environment.

Usage:
    alembic upgrade head
    alembic -x url=postgresql+asyncpg://... upgrade head
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context
from claimdesk.core.config import settings
from claimdesk.infrastructure.persistence import models  # noqa: F401
from claimdesk.infrastructure.persistence.base import BaseModel

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = BaseModel.metadata


def database_url() -> str:
    """``-x url=`` override, else the configured application database."""
    return context.get_x_argument(as_dictionary=True).get("url", settings.database_url)


def configure_context(**kwargs: object) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        **kwargs,
    )


def run_offline() -> None:
    """Emit SQL to stdout instead of executing it (``alembic upgrade --sql``)."""
    configure_context(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    configure_context(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    """Apply migrations over a single async connection."""
    engine = create_async_engine(database_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
