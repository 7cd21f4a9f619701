from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

# Base + every mapped model, so autogenerate sees the full schema
from app.db.session import Base, DATABASE_URL
from app.models.admin import Admin  # noqa: F401
from app.models.booking import Booking  # noqa: F401
from app.models.venue import Venue  # noqa: F401
from app.models.venue_unavailable_date import VenueUnavailableDate  # noqa: F401

config = context.config

# DATABASE_URL comes from the environment / .env via app.db.session
config.set_main_option("sqlalchemy.url", DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline():
    """Emit SQL to stdout instead of touching a database."""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=DATABASE_URL.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            # SQLite cannot ALTER most things in place
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
