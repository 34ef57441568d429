"""WHERE clause of the announcement listing.

Every filter is a small pure function ``(params, ids) -> clause | None``;
``None`` means the parameter is absent or set to its sentinel.
``build_predicate`` folds them into one conjunction.

Filters that need a lookup first (CPV codes, archived announcements) receive
their announcement IDs through :class:`ResolvedIds`, filled by
``listing_service.resolve_ids`` before the predicate is built.
"""

from dataclasses import dataclass
from datetime import datetime, time
from functools import reduce
from typing import Callable, List, Optional

from sqlalchemy import and_, or_, select, true
from sqlalchemy.sql.elements import ColumnElement

from concursos.models.alterations import Alteration
from concursos.models.announcements import Announcement
from concursos.schemas.listing import ALL, ListingParams
from concursos.services.pricing import effective_price
from concursos.utils.query_params import escape_like

END_OF_DAY = time(23, 59, 59, 999000)


@dataclass
class ResolvedIds:
    cpv_ids: Optional[List[int]] = None
    archived_ids: Optional[List[int]] = None


Clause = Optional[ColumnElement]
ClauseBuilder = Callable[[ListingParams, ResolvedIds], Clause]


def _contains(column, value: str) -> ColumnElement:
    return column.ilike(f"%{escape_like(value)}%", escape="\\")


def search_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if not params.search:
        return None
    return _contains(Announcement.summary, params.search)


def entity_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if not params.entity:
        return None
    return _contains(Announcement.entity_designacao, params.entity)


def district_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if params.district == ALL:
        return None
    # без % - точное совпадение без учёта регистра
    return Announcement.entity_distrito.ilike(escape_like(params.district), escape="\\")


def contract_type_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if params.contract_type == ALL:
        return None
    return Announcement.object_main_contract_type == params.contract_type


def cpv_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if params.cpv == ALL or ids.cpv_ids is None:
        return None
    return Announcement.id.in_(ids.cpv_ids)


def archived_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if not params.show_archived or ids.archived_ids is None:
        return None
    return Announcement.id.in_(ids.archived_ids)


def price_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if params.min_price is None and params.max_price is None:
        return None
    clauses = [effective_price.is_not(None)]
    if params.min_price is not None:
        clauses.append(effective_price >= params.min_price)
    if params.max_price is not None:
        clauses.append(effective_price <= params.max_price)
    return and_(*clauses)


def date_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    clauses = []
    if params.min_date is not None:
        clauses.append(Announcement.publication_date >= datetime.combine(params.min_date, time.min))
    if params.max_date is not None:
        clauses.append(Announcement.publication_date <= datetime.combine(params.max_date, END_OF_DAY))
    return and_(*clauses) if clauses else None


def expiry_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    if params.include_expired:
        return Announcement.expired.is_(True)
    if params.include_na:
        return or_(Announcement.expired.is_(False), Announcement.expired.is_(None))
    return Announcement.expired.is_(False)


def not_superseded_clause(params: ListingParams, ids: ResolvedIds) -> Clause:
    """Hides announcements replaced by a newer version; applies to every listing."""
    superseded = select(Alteration.previous_internal_id).where(Alteration.previous_internal_id.is_not(None))
    return or_(Announcement.internal_id.is_(None), Announcement.internal_id.not_in(superseded))


CLAUSE_BUILDERS: List[ClauseBuilder] = [
    not_superseded_clause,
    search_clause,
    entity_clause,
    district_clause,
    contract_type_clause,
    cpv_clause,
    archived_clause,
    price_clause,
    date_clause,
    expiry_clause,
]


def build_predicate(params: ListingParams, ids: ResolvedIds,
                    builders: List[ClauseBuilder] = CLAUSE_BUILDERS) -> ColumnElement:
    clauses = (build(params, ids) for build in builders)
    return reduce(
        lambda predicate, clause: predicate if clause is None else and_(predicate, clause),
        clauses,
        true(),
    )
