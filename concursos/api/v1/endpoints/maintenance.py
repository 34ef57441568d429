from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.api.v1.deps import internal_error
from concursos.core.logging_config import logger
from concursos.db.database import get_db
from concursos.schemas.maintenance import ExpiredRefreshResponse
from concursos.services.expiry_service import refresh_expired

router = APIRouter()


@router.post("/update-expired", response_model=ExpiredRefreshResponse)
async def update_expired(db: AsyncSession = Depends(get_db)):
    logger.info("Refreshing expired flags")
    try:
        counts = await refresh_expired(db)
    except Exception as e:
        raise internal_error("Failed to update expired status", e)
    logger.info(f"Expired flags refreshed: {counts.dict()}")
    return ExpiredRefreshResponse(
        success=True,
        message="Expired status updated successfully",
        counts=counts,
    )
