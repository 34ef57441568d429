from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.api.v1.deps import announcement_id_path, internal_error
from concursos.core.logging_config import logger
from concursos.crud.notes import delete_note, get_note, upsert_note
from concursos.crud.procurements import announcement_exists
from concursos.db.database import get_db
from concursos.schemas.notes import Note, NoteResponse, NoteSaved, NoteWrite

router = APIRouter()


@router.get("/{announcement_id}/notes", response_model=NoteResponse)
async def get_procurement_note(
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    try:
        note = await get_note(db, announcement_id)
    except Exception as e:
        raise internal_error("Failed to fetch note", e)
    return NoteResponse(note=Note.model_validate(note) if note else None)


@router.post("/{announcement_id}/notes", response_model=NoteSaved)
async def save_procurement_note(
        body: NoteWrite,
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    try:
        if not await announcement_exists(db, announcement_id):
            logger.warning(f"Announcement {announcement_id} not found")
            raise HTTPException(status_code=404, detail="Announcement not found")
        note = await upsert_note(db, announcement_id, body.noteText)
        logger.info(f"Saved note for announcement {announcement_id} ({len(body.noteText)} chars)")
        return NoteSaved(success=True, note=Note.model_validate(note))
    except HTTPException:
        raise
    except Exception as e:
        await db.rollback()
        raise internal_error("Failed to save note", e)


@router.delete("/{announcement_id}/notes")
async def delete_procurement_note(
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    try:
        await delete_note(db, announcement_id)
    except Exception as e:
        await db.rollback()
        raise internal_error("Failed to delete note", e)
    logger.info(f"Deleted note for announcement {announcement_id}")
    return {"success": True}
