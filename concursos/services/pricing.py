"""Effective price of an announcement.

First non-null of, in order:

1. ``processo_preco_base_valor`` (process base price);
2. ``base_price``;
3. the price of the first CPV row, by ascending code, that carries one.

Rows sharing a code are tied on ``id`` (insertion order) only so the pick is
deterministic; it does not change the precedence above.

The same expression is used to filter, to sort and to display, so the three
can never disagree.
"""

from sqlalchemy import func, select

from concursos.models.announcements import Announcement
from concursos.models.cpvs import Cpv

cpv_fallback_price = (
    select(Cpv.base_price)
    .where(Cpv.announcement_id == Announcement.id, Cpv.base_price.is_not(None))
    .order_by(Cpv.code, Cpv.id)
    .limit(1)
    .correlate(Announcement)
    .scalar_subquery()
)

effective_price = func.coalesce(
    Announcement.processo_preco_base_valor,
    Announcement.base_price,
    cpv_fallback_price,
)


def price_order(direction: str):
    """Null prices always go last, whichever way the list is sorted."""
    ordered = effective_price.asc() if direction == "asc" else effective_price.desc()
    return ordered.nulls_last()
