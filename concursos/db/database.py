from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from concursos.core.config import settings


def build_engine(url: str, schema: str | None = None):
    """Создаёт движок; модели без схемы, схема подставляется через schema_translate_map."""
    engine = create_async_engine(url, echo=False, future=True)
    if schema:
        engine = engine.execution_options(schema_translate_map={None: schema})
    return engine


engine = build_engine(settings.DATABASE_URL, settings.DB_SCHEMA)
AsyncSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session
