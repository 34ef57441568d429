from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, field_validator

from concursos.services.deadlines import parse_deadline


class AnnouncementOut(BaseModel):
    id: int
    diario_id: Optional[int] = None
    issuer: Optional[str] = None
    number: Optional[str] = None
    pdf_url: Optional[str] = None
    summary: Optional[str] = None
    processo_tipo: Optional[str] = None
    processo_preco_base_valor: Optional[float] = None
    base_price: Optional[float] = None
    asset_valuation: Optional[float] = None
    internal_id: Optional[str] = None
    object_designation: Optional[str] = None
    object_description: Optional[str] = None
    object_main_contract_type: Optional[str] = None
    object_contract_type: Optional[str] = None
    object_main_cpv: Optional[str] = None
    entity_designacao: Optional[str] = None
    entity_distrito: Optional[str] = None
    entity_concelho: Optional[str] = None
    publication_date: Optional[datetime] = None
    application_deadline: Optional[Union[datetime, str]] = None
    expired: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    effective_price: Optional[float] = None
    cpv_codes: List[str] = []
    criteria_type: Literal["precos", "outros"] = "outros"

    class Config:
        from_attributes = True

    @field_validator("application_deadline", mode="before")
    @classmethod
    def normalize_deadline(cls, value):
        # Нераспознанный срок отдаём как есть
        return parse_deadline(value) or value


class AdjudicationFactorOut(BaseModel):
    id: int
    announcement_id: int
    factor_name: Optional[str] = None
    other_factor_name: Optional[str] = None
    percentage: Optional[float] = None
    sub_factor_name: Optional[str] = None
    sub_factor_percentage: Optional[float] = None

    class Config:
        from_attributes = True


class AdjudicationFactorsResponse(BaseModel):
    factors: List[AdjudicationFactorOut]
