from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.api.v1.deps import announcement_id_path, internal_error
from concursos.core.logging_config import logger
from concursos.crud.archive import delete_archive_entry, get_archive_entry, upsert_archive_entry
from concursos.crud.procurements import announcement_exists
from concursos.db.database import get_db
from concursos.schemas.archive import ArchiveStatus, ArchiveUpdated, ArchiveWrite

router = APIRouter()


@router.get("/{announcement_id}/archive", response_model=ArchiveStatus)
async def get_archive_status(
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    try:
        entry = await get_archive_entry(db, announcement_id)
    except Exception as e:
        raise internal_error("Failed to fetch archive status", e)
    return ArchiveStatus(isArchived=bool(entry and entry.is_archived), exists=entry is not None)


@router.post("/{announcement_id}/archive", response_model=ArchiveUpdated)
async def set_archive_status(
        body: ArchiveWrite,
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    try:
        if not await announcement_exists(db, announcement_id):
            logger.warning(f"Announcement {announcement_id} not found")
            raise HTTPException(status_code=404, detail="Announcement not found")

        # Разархивирование = удаление записи
        if not body.isArchived:
            await delete_archive_entry(db, announcement_id)
            logger.info(f"Announcement {announcement_id} unarchived")
            return ArchiveUpdated(success=True, isArchived=False)

        entry = await upsert_archive_entry(db, announcement_id, True)
        logger.info(f"Announcement {announcement_id} archived")
        return ArchiveUpdated(success=True, isArchived=entry.is_archived)
    except HTTPException:
        raise
    except Exception as e:
        await db.rollback()
        raise internal_error("Failed to update archive status", e)
