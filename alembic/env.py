"""Migration environment for the storefront schema.

Offline mode renders SQL for the six shop_* tables; online mode applies it
through an asyncpg engine built from the same URL the application uses.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# The persistence.models import fills Base.metadata with the shop tables.
from shopstore.infrastructure.database import Base, settings  # noqa: E402
import shopstore.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = Base.metadata


def _database_url() -> str:
    """DATABASE_URL wins over sqlalchemy.url, which wins over Settings."""
    return (
        os.environ.get("DATABASE_URL")
        or config.get_main_option("sqlalchemy.url")
        or settings.database_url
    )


def _migrate(**options) -> None:  # type: ignore[no-untyped-def]
    context.configure(target_metadata=target_metadata, compare_type=True, **options)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    _migrate(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def _migrate_on(connection: Connection) -> None:
    _migrate(connection=connection)


async def run_migrations_online() -> None:
    engine = create_async_engine(_database_url(), echo=settings.database_echo)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_on)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
