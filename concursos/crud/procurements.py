from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.models.adjudication_factors import AdjudicationFactor
from concursos.models.announcements import Announcement
from concursos.models.cpvs import Cpv
from concursos.services.cpv_matching import cpv_code_clause
from concursos.services.pricing import effective_price
from concursos.core.logging_config import logger


async def get_announcement_with_price(db: AsyncSession, announcement_id: int) -> Optional[Tuple[Announcement, object]]:
    """Анонс и его итоговая цена (см. services.pricing)."""
    result = await db.execute(
        select(Announcement, effective_price.label("effective_price"))
        .where(Announcement.id == announcement_id)
    )
    row = result.first()
    if not row:
        logger.warning(f"Announcement {announcement_id} not found")
        return None
    return row[0], row[1]


async def announcement_exists(db: AsyncSession, announcement_id: int) -> bool:
    result = await db.execute(select(Announcement.id).where(Announcement.id == announcement_id))
    return result.scalar() is not None


async def get_announcement_ids_for_cpv(db: AsyncSession, code: str) -> List[int]:
    """ID анонсов, у которых есть этот CPV или дочерний к нему."""
    result = await db.execute(
        select(Cpv.announcement_id).where(cpv_code_clause(code)).distinct()
    )
    ids = list(result.scalars().all())
    logger.debug(f"CPV {code} matched {len(ids)} announcements")
    return ids


async def get_cpv_codes_by_announcement(db: AsyncSession, announcement_ids: Sequence[int]) -> Dict[int, List[str]]:
    if not announcement_ids:
        return {}
    result = await db.execute(
        select(Cpv.announcement_id, Cpv.code)
        .where(Cpv.announcement_id.in_(announcement_ids))
        .order_by(Cpv.announcement_id, Cpv.code)
    )
    codes = defaultdict(list)
    for announcement_id, code in result.all():
        codes[announcement_id].append(code)
    return codes


async def get_distinct_cpv_codes(db: AsyncSession, announcement_ids: Sequence[int]) -> List[str]:
    if not announcement_ids:
        return []
    result = await db.execute(
        select(Cpv.code)
        .where(Cpv.announcement_id.in_(announcement_ids))
        .distinct()
        .order_by(Cpv.code)
    )
    return list(result.scalars().all())


async def get_adjudication_factors(db: AsyncSession, announcement_id: int) -> List[AdjudicationFactor]:
    result = await db.execute(
        select(AdjudicationFactor)
        .filter_by(announcement_id=announcement_id)
        .order_by(AdjudicationFactor.id)
    )
    return list(result.scalars().all())


async def get_factors_by_announcement(db: AsyncSession, announcement_ids: Sequence[int]) -> Dict[int, List[AdjudicationFactor]]:
    if not announcement_ids:
        return {}
    result = await db.execute(
        select(AdjudicationFactor).where(AdjudicationFactor.announcement_id.in_(announcement_ids))
    )
    factors = defaultdict(list)
    for factor in result.scalars().all():
        factors[factor.announcement_id].append(factor)
    return factors


async def get_distinct_column_values(db: AsyncSession, column, announcement_ids: Optional[Sequence[int]] = None) -> List[str]:
    """Отсортированные непустые значения колонки анонсов (районы, типы контрактов)."""
    query = select(column).where(column.is_not(None), func.trim(column) != "").distinct().order_by(column)
    if announcement_ids is not None:
        query = query.where(Announcement.id.in_(announcement_ids))
    result = await db.execute(query)
    return list(result.scalars().all())
