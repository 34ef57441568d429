from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from concursos.models.notes import Note


async def get_note(db: AsyncSession, announcement_id: int) -> Optional[Note]:
    result = await db.execute(select(Note).filter_by(announcement_id=announcement_id))
    return result.scalars().first()


async def upsert_note(db: AsyncSession, announcement_id: int, note_text: str) -> Note:
    note = await get_note(db, announcement_id)
    if note:
        note.note_text = note_text
    else:
        note = Note(announcement_id=announcement_id, note_text=note_text)
    db.add(note)
    await db.commit()
    await db.refresh(note)
    return note


async def delete_note(db: AsyncSession, announcement_id: int) -> None:
    await db.execute(delete(Note).where(Note.announcement_id == announcement_id))
    await db.commit()
