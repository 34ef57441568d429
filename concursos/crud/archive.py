from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from concursos.models.archive import ArchiveEntry


async def get_archive_entry(db: AsyncSession, announcement_id: int) -> Optional[ArchiveEntry]:
    result = await db.execute(select(ArchiveEntry).filter_by(announcement_id=announcement_id))
    return result.scalars().first()


async def get_archived_announcement_ids(db: AsyncSession) -> List[int]:
    result = await db.execute(
        select(ArchiveEntry.announcement_id).where(ArchiveEntry.is_archived.is_(True))
    )
    return list(result.scalars().all())


async def upsert_archive_entry(db: AsyncSession, announcement_id: int, is_archived: bool) -> ArchiveEntry:
    entry = await get_archive_entry(db, announcement_id)
    if entry:
        entry.is_archived = is_archived
    else:
        entry = ArchiveEntry(announcement_id=announcement_id, is_archived=is_archived)
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


async def delete_archive_entry(db: AsyncSession, announcement_id: int) -> None:
    await db.execute(delete(ArchiveEntry).where(ArchiveEntry.announcement_id == announcement_id))
    await db.commit()
