import asyncio

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from concursos.core.config import settings
from concursos.models.base import Base
from concursos.models import adjudication_factors, alterations, announcements, archive, cpvs, notes  # noqa: F401

config = context.config
target_metadata = Base.metadata
schema = settings.DB_SCHEMA or None

def database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL

def run_migrations_offline():
    context.configure(
        url=database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        version_table_schema=schema,
    )
    with context.begin_transaction():
        context.run_migrations()

def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        version_table_schema=schema,
    )
    with context.begin_transaction():
        context.run_migrations()

async def run_migrations_online():
    # Отдельный движок без schema_translate_map; схему создаёт concursos.migrate
    engine = create_async_engine(database_url())
    async with engine.begin() as connection:
        await connection.run_sync(do_run_migrations)
    await engine.dispose()

if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
