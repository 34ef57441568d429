import math
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.core.logging_config import logger
from concursos.crud.archive import get_archived_announcement_ids
from concursos.crud.procurements import (
    get_announcement_ids_for_cpv,
    get_cpv_codes_by_announcement,
    get_factors_by_announcement,
)
from concursos.models.announcements import Announcement
from concursos.schemas.listing import ALL, ListingParams, ListingResponse, Pagination
from concursos.schemas.procurement import AnnouncementOut
from concursos.services.criteria import PRICE_ONLY, criteria_type
from concursos.services.listing_filters import ResolvedIds, build_predicate
from concursos.services.pricing import effective_price, price_order


async def resolve_ids(db: AsyncSession, params: ListingParams) -> Optional[ResolvedIds]:
    """Looks up ID-based filters; None means nothing can match."""
    ids = ResolvedIds()
    if params.cpv != ALL:
        ids.cpv_ids = await get_announcement_ids_for_cpv(db, params.cpv)
        if not ids.cpv_ids:
            logger.info(f"No announcements for CPV {params.cpv}")
            return None
    if params.show_archived:
        ids.archived_ids = await get_archived_announcement_ids(db)
        if not ids.archived_ids:
            logger.info("No archived announcements")
            return None
    return ids


def order_by(params: ListingParams) -> list:
    date_column = Announcement.publication_date
    by_date = date_column.asc() if params.date_sort_order == "asc" else date_column.desc()
    ordering = [by_date.nulls_last(), Announcement.id.desc()]
    if params.price_sort_order != "none":
        ordering.insert(0, price_order(params.price_sort_order))
    return ordering


def empty_page(params: ListingParams) -> ListingResponse:
    return ListingResponse(
        data=[],
        pagination=Pagination(page=params.page, limit=params.limit, total=0, pages=0),
    )


async def decorate(db: AsyncSession, rows: Sequence) -> List[AnnouncementOut]:
    """Adds cpv_codes, effective_price and criteria_type to each (announcement, price) row."""
    ids = [announcement.id for announcement, _ in rows]
    codes = await get_cpv_codes_by_announcement(db, ids)
    factors = await get_factors_by_announcement(db, ids)

    items = []
    for announcement, price in rows:
        item = AnnouncementOut.model_validate(announcement)
        item.effective_price = float(price) if price is not None else None
        item.cpv_codes = codes.get(announcement.id, [])
        item.criteria_type = criteria_type(factors.get(announcement.id, []))
        items.append(item)
    return items


async def list_announcements(db: AsyncSession, params: ListingParams) -> ListingResponse:
    ids = await resolve_ids(db, params)
    if ids is None:
        return empty_page(params)

    predicate = build_predicate(params, ids)

    total_query = select(func.count()).select_from(select(Announcement.id).where(predicate).subquery())
    total = (await db.execute(total_query)).scalar() or 0

    query = (
        select(Announcement, effective_price.label("effective_price"))
        .where(predicate)
        .order_by(*order_by(params))
        .offset(params.offset)
        .limit(params.limit)
    )
    rows = (await db.execute(query)).all()
    items = await decorate(db, rows)

    # criteria_type вычисляется после выборки, поэтому total/pages его не учитывают
    # и страница может оказаться короче limit
    if params.criteria == PRICE_ONLY:
        items = [item for item in items if item.criteria_type == PRICE_ONLY]

    logger.info(f"Returning {len(items)} announcements, total={total}")
    return ListingResponse(
        data=items,
        pagination=Pagination(
            page=params.page,
            limit=params.limit,
            total=total,
            pages=math.ceil(total / params.limit),
        ),
    )
