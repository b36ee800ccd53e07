"""Alembic environment for House Hunt.

Migrations run on a blocking driver; the async driver in DATABASE_URL is
swapped for its sync counterpart before Alembic connects.
"""
from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import make_url

from househunt.core.config import get_settings
from househunt.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg2",
}


def migration_url() -> str:
    """ALEMBIC_DATABASE_URL wins as is; otherwise the app url with a sync driver."""
    override = os.getenv("ALEMBIC_DATABASE_URL")
    if override:
        return override

    app_url = get_settings().database_url or config.get_main_option("sqlalchemy.url")
    url = make_url(app_url)
    sync_driver = SYNC_DRIVERS.get(url.drivername)
    if sync_driver:
        url = url.set(drivername=sync_driver)
    return url.render_as_string(hide_password=False)


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most columns in place, so batch mode rebuilds tables
    url = kwargs.get("url") or kwargs["connection"].engine.url
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=make_url(str(url)).get_backend_name() == "sqlite",
        **kwargs,
    )


def run_offline() -> None:
    _configure(url=migration_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = migration_url()
    engine = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
