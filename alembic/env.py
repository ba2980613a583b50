import os
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
fileConfig(config.config_file_name)

# Import target metadata from the app's Base
from orders_api.database import Base
from orders_api import models  # noqa: F401  (registers the orders table)

target_metadata = Base.metadata

# async drivers used by the app -> sync drivers alembic can run with
_SYNC_DRIVERS = {"+asyncpg": "", "+aiosqlite": ""}


def get_url():
    # Prefer env var DATABASE_URL; alembic expects a sync driver (psycopg2 / sqlite3)
    url = os.environ.get('DATABASE_URL')
    if url:
        # If url uses an async driver (asyncpg, aiosqlite) convert to sync URL for Alembic
        for async_driver, sync_driver in _SYNC_DRIVERS.items():
            url = url.replace(async_driver, sync_driver)
        return url
    # fallback to ini
    return config.get_main_option('sqlalchemy.url')


def run_migrations_offline():
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    configuration = config.get_section(config.config_ini_section)
    configuration['sqlalchemy.url'] = get_url()

    connectable = engine_from_config(
        configuration,
        prefix='sqlalchemy.',
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
