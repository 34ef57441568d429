import re
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.core.config import settings
from concursos.core.logging_config import logger
from concursos.models.announcements import Announcement
from concursos.schemas.maintenance import ExpiredCounts
from concursos.services.deadlines import compute_expired

_FUNCTION_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


async def call_refresh_function(db: AsyncSession, function_name: str) -> None:
    if not _FUNCTION_NAME.match(function_name):
        raise ValueError(f"Invalid database function name: {function_name!r}")
    logger.info(f"Calling database function {function_name}()")
    await db.execute(text(f"SELECT {function_name}()"))


async def recompute_expired(db: AsyncSession, now: datetime) -> int:
    """Пересчитывает expired по application_deadline; возвращает число изменённых строк."""
    result = await db.execute(
        select(Announcement.id, Announcement.application_deadline, Announcement.expired)
    )
    changes: Dict[Optional[bool], List[int]] = {True: [], False: [], None: []}
    for announcement_id, deadline, current in result.all():
        value = compute_expired(deadline, now)
        if value is not current:
            changes[value].append(announcement_id)

    changed = 0
    for value, ids in changes.items():
        if ids:
            await db.execute(
                update(Announcement).where(Announcement.id.in_(ids)).values(expired=value)
            )
            changed += len(ids)
    logger.info(f"Recomputed expired flag, {changed} announcements changed")
    return changed


async def count_by_expiry(db: AsyncSession) -> ExpiredCounts:
    result = await db.execute(
        select(Announcement.expired, func.count()).group_by(Announcement.expired)
    )
    counts = {value: count for value, count in result.all()}
    expired = counts.get(True, 0)
    active = counts.get(False, 0)
    na = counts.get(None, 0)
    return ExpiredCounts(expired=expired, active=active, na=na, total=expired + active + na)


async def refresh_expired(db: AsyncSession, now: Optional[datetime] = None) -> ExpiredCounts:
    try:
        if settings.EXPIRED_REFRESH_FUNCTION:
            await call_refresh_function(db, settings.EXPIRED_REFRESH_FUNCTION)
        else:
            await recompute_expired(db, now or datetime.now())
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    return await count_by_expiry(db)
