from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from concursos.api.v1.deps import internal_error
from concursos.crud.procurements import (
    get_announcement_ids_for_cpv,
    get_distinct_column_values,
    get_distinct_cpv_codes,
)
from concursos.db.database import get_db
from concursos.models.announcements import Announcement
from concursos.schemas.listing import ALL
from concursos.utils.query_params import clean_text, parse_id_list

router = APIRouter()


async def _distinct_for_cpv(db: AsyncSession, column, cpv: Optional[str]) -> List[str]:
    cpv = clean_text(cpv)
    announcement_ids = None
    if cpv and cpv != ALL:
        announcement_ids = await get_announcement_ids_for_cpv(db, cpv)
        if not announcement_ids:
            return []
    return await get_distinct_column_values(db, column, announcement_ids)


@router.get("/contract-types", response_model=List[str])
async def get_contract_types(
        cpv: Optional[str] = Query(None, description="Ограничить анонсами с этим CPV"),
        db: AsyncSession = Depends(get_db)
):
    try:
        return await _distinct_for_cpv(db, Announcement.object_main_contract_type, cpv)
    except Exception as e:
        raise internal_error("Failed to fetch contract types", e)


@router.get("/districts", response_model=List[str])
async def get_districts(
        cpv: Optional[str] = Query(None, description="Ограничить анонсами с этим CPV"),
        db: AsyncSession = Depends(get_db)
):
    try:
        return await _distinct_for_cpv(db, Announcement.entity_distrito, cpv)
    except Exception as e:
        raise internal_error("Failed to fetch districts", e)


@router.get("/cpvs")
async def get_cpvs(
        ids: Optional[str] = Query(None, description="ID анонсов через запятую"),
        test_ids: Optional[str] = Query(None, alias="testIds", description="Старое имя параметра ids"),
        db: AsyncSession = Depends(get_db)
):
    announcement_ids = sorted(set(parse_id_list(ids)) | set(parse_id_list(test_ids)))
    if not announcement_ids:
        return {"cpvs": []}
    try:
        return {"cpvs": await get_distinct_cpv_codes(db, announcement_ids)}
    except Exception as e:
        raise internal_error("Failed to fetch CPV codes", e)
