from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel

from concursos.core.config import settings
from concursos.schemas.procurement import AnnouncementOut

ALL = "all"


class ListingParams(BaseModel):
    search: Optional[str] = None
    entity: Optional[str] = None
    district: str = ALL
    contract_type: str = ALL
    cpv: str = ALL
    criteria: str = "outros"
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    include_expired: bool = False
    include_na: bool = True
    show_archived: bool = False
    date_sort_order: Literal["asc", "desc"] = "desc"
    price_sort_order: Literal["asc", "desc", "none"] = "none"
    page: int = 1
    limit: int = settings.DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ListingResponse(BaseModel):
    data: List[AnnouncementOut]
    pagination: Pagination
