# nids_dashboard/migrations/env.py
from alembic import context
from sqlalchemy import engine_from_config, pool
from nids_dashboard import db
from nids_dashboard.core import database  # noqa: F401  registers the tables on db.metadata
from nids_dashboard.config.settings import Config

config = context.config
config.set_main_option('sqlalchemy.url', Config.SQLALCHEMY_DATABASE_URI)
target_metadata = db.metadata

if context.is_offline_mode():
    context.configure(
        url=Config.SQLALCHEMY_DATABASE_URI,
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix='sqlalchemy.',
        poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()
