"""Alembic environment for the person-record tables."""
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from records_api.core.config import settings
from records_api.models.base import Base
import records_api.models.person  # noqa: F401  registers pacientes/medicos/funcionarios

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Settings already honour DATABASE_URL from the environment or .env
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)


def run_migrations() -> None:
    if context.is_offline_mode():
        # `alembic upgrade head --sql`: emit DDL without connecting
        context.configure(
            url=config.get_main_option("sqlalchemy.url"),
            target_metadata=Base.metadata,
            literal_binds=True,
        )
        with context.begin_transaction():
            context.run_migrations()
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        # render_as_batch lets autogenerated ALTERs work on SQLite
        context.configure(connection=connection, target_metadata=Base.metadata, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()


run_migrations()
