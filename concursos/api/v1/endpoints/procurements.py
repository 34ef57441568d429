from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.api.v1.deps import announcement_id_path, internal_error
from concursos.core.config import settings
from concursos.core.logging_config import logger
from concursos.crud.procurements import (
    get_adjudication_factors,
    get_announcement_with_price,
)
from concursos.db.database import get_db
from concursos.schemas.listing import ALL, ListingParams, ListingResponse
from concursos.schemas.procurement import (
    AdjudicationFactorOut,
    AdjudicationFactorsResponse,
    AnnouncementOut,
)
from concursos.services.listing_service import decorate, list_announcements
from concursos.utils.query_params import (
    clean_text,
    parse_bool,
    parse_choice,
    parse_date,
    parse_decimal,
    parse_int,
)

router = APIRouter()

# Сверх этих значений page/limit считаются некорректными
MAX_PAGE_SIZE = 100
MAX_PAGE = 1_000_000


def listing_params(
        search: Optional[str] = Query(None, description="Поиск по summary"),
        entity: Optional[str] = Query(None, description="Поиск по названию организации"),
        district: Optional[str] = Query(ALL, description="Район (точное совпадение) или all"),
        contract_type: Optional[str] = Query(ALL, alias="contractType", description="Тип контракта или all"),
        cpv: Optional[str] = Query(ALL, description="CPV код или all; хвост из 00 ищет дочерние коды"),
        criteria: Optional[str] = Query("outros", description="precos - только критерий цены"),
        min_price: Optional[str] = Query(None, alias="minPrice"),
        max_price: Optional[str] = Query(None, alias="maxPrice"),
        min_date: Optional[str] = Query(None, alias="minDate", description="YYYY-MM-DD"),
        max_date: Optional[str] = Query(None, alias="maxDate", description="YYYY-MM-DD, включительно"),
        include_expired: Optional[str] = Query(None, alias="includeExpired"),
        include_na: Optional[str] = Query(None, alias="includeNA"),
        show_archived: Optional[str] = Query(None, alias="showArchived"),
        date_sort_order: Optional[str] = Query("desc", alias="dateSortOrder", description="asc, desc"),
        price_sort_order: Optional[str] = Query("none", alias="priceSortOrder", description="asc, desc, none"),
        page: Optional[str] = Query("1", description="Номер страницы"),
        limit: Optional[str] = Query(None, description="Количество записей на странице"),
) -> ListingParams:
    return ListingParams(
        search=clean_text(search),
        entity=clean_text(entity),
        district=clean_text(district) or ALL,
        contract_type=clean_text(contract_type) or ALL,
        cpv=clean_text(cpv) or ALL,
        criteria=clean_text(criteria) or "outros",
        min_price=parse_decimal(min_price),
        max_price=parse_decimal(max_price),
        min_date=parse_date(min_date),
        max_date=parse_date(max_date),
        include_expired=parse_bool(include_expired, False),
        include_na=parse_bool(include_na, True),
        show_archived=parse_bool(show_archived, False),
        date_sort_order=parse_choice(date_sort_order, ("asc", "desc"), "desc"),
        price_sort_order=parse_choice(price_sort_order, ("asc", "desc", "none"), "none"),
        page=parse_int(page, 1, maximum=MAX_PAGE),
        limit=parse_int(limit, settings.DEFAULT_PAGE_SIZE, maximum=MAX_PAGE_SIZE),
    )


@router.get("/", response_model=ListingResponse)
async def get_procurements(
        params: ListingParams = Depends(listing_params),
        db: AsyncSession = Depends(get_db)
):
    logger.info(f"Fetching procurements list: {params.dict(exclude_defaults=True)}")
    try:
        return await list_announcements(db, params)
    except Exception as e:
        raise internal_error("Failed to fetch procurements", e)


@router.get("/{announcement_id}", response_model=AnnouncementOut)
async def get_procurement(
        announcement_id: int = Depends(announcement_id_path),
        db: AsyncSession = Depends(get_db)
):
    logger.info(f"Fetching details for announcement {announcement_id}")
    try:
        row = await get_announcement_with_price(db, announcement_id)
        if not row:
            raise HTTPException(status_code=404, detail="Procurement not found")
        items = await decorate(db, [row])
        return items[0]
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("Failed to fetch procurement", e)


@router.get("/{announcement_id}/adjudication-factors", response_model=AdjudicationFactorsResponse)
async def get_procurement_adjudication_factors(
        announcement_id: str,
        db: AsyncSession = Depends(get_db)
):
    if not announcement_id.lstrip("-").isdigit():
        return AdjudicationFactorsResponse(factors=[])
    try:
        factors = await get_adjudication_factors(db, int(announcement_id))
        return AdjudicationFactorsResponse(
            factors=[AdjudicationFactorOut.model_validate(factor) for factor in factors]
        )
    except Exception as e:
        raise internal_error("Failed to fetch adjudication factors", e)
