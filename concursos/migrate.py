import asyncio
import asyncpg
from alembic.config import Config
from alembic import command
from concursos.core.config import settings
from concursos.core.logging_config import logger


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def create_schema(conn, schema: str):
    # Таблицы и alembic_version живут в DB_SCHEMA, её нужно создать до upgrade
    await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {quote_identifier(schema)}")
    logger.info(f"Schema {schema} is ready")


async def wait_for_db(retries: int = 5, delay: float = 2):
    """Ждёт доступности БД и создаёт схему анонсов, если она задана."""
    db_url = settings.DATABASE_URL.replace("postgresql+asyncpg://", "postgresql://")
    for i in range(retries):
        try:
            conn = await asyncpg.connect(db_url)
        except Exception as e:
            logger.error(f"Waiting for database... Attempt {i+1}/{retries}: {e}")
            await asyncio.sleep(delay)
            continue
        try:
            if settings.DB_SCHEMA:
                await create_schema(conn, settings.DB_SCHEMA)
        finally:
            await conn.close()
        logger.info("Database is ready!")
        return True
    logger.error("Failed to connect to database after retries")
    raise ConnectionError("Database connection failed")


def apply_migrations(config_path: str = "alembic.ini"):
    try:
        asyncio.run(wait_for_db())
        logger.info("Starting migrations...")
        alembic_cfg = Config(config_path)
        alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
        logger.info("Running Alembic upgrade to head...")
        command.upgrade(alembic_cfg, "head", sql=False)
        logger.info("Migrations applied!")
    except Exception as e:
        logger.error(f"Failed to apply migrations: {e}")
        raise


if __name__ == "__main__":
    apply_migrations()
