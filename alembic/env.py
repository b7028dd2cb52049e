"""Alembic migration environment for tunerec."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

import tunerec.models  # noqa: F401
from tunerec.models.base import BaseModel

config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name)

target_metadata = BaseModel.metadata


def _database_url() -> str:
    """Prefer an explicit alembic URL, otherwise fall back to DATABASE_URL."""
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    from tunerec.config.settings import settings

    return settings.DATABASE_URL


def run_migrations_offline() -> None:
    """Emit migration SQL without a live connection."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live connection."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
