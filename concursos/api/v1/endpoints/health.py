from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.core.logging_config import logger
from concursos.db.database import get_db

router = APIRouter()


@router.get("/")
async def health(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        database = "unavailable"
    return {"status": "ok", "database": database}
