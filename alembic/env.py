import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from src.config import settings
from src.database import Base
from src.models import Question  # noqa: F401  регистрирует таблицу questions в Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Адрес БД живет только в settings, alembic.ini его не хранит
DATABASE_URL = settings.database_url

target_metadata = Base.metadata


def _run(**configure_kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        **configure_kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Генерирует SQL-скрипт без подключения к БД (alembic upgrade --sql)."""
    _run(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})


async def run_migrations_online() -> None:
    # Отдельный движок без пула: миграции живут одну команду
    migration_engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with migration_engine.connect() as connection:
            await connection.run_sync(lambda sync_conn: _run(connection=sync_conn))
    finally:
        await migration_engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
