"""SQL Record Store.

Stores cash cards in the `cash_cards` table through an AsyncSession. The
session belongs to the request (see cashcard.database.get_db_session), which
commits after the handler returns; this store only flushes, so generated ids
are available immediately and a failing request rolls back cleanly.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.models.cash_card import CashCard
from cashcard.pagination import PageRequest

logger = logging.getLogger(__name__)


class SqlCashCardStore:
    """CashCardStore backed by a relational table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def lookup(self, card_id: int) -> Optional[CashCard]:
        result = await self.session.execute(
            select(CashCard).where(CashCard.id == card_id)
        )
        return result.scalar_one_or_none()

    async def save(self, card: CashCard) -> CashCard:
        if card.id is None:
            self.session.add(card)
        else:
            # Attached instances come back unchanged; detached ones are
            # copied onto the row with the same primary key
            card = await self.session.merge(card)
        await self.session.flush()
        logger.debug("Saved %r", card)
        return card

    async def delete(self, card_id: int) -> bool:
        result = await self.session.execute(
            delete(CashCard).where(CashCard.id == card_id)
        )
        return result.rowcount > 0

    async def list_page(self, page_request: PageRequest) -> List[CashCard]:
        ordering = [
            desc(getattr(CashCard, order.field)) if order.descending
            else asc(getattr(CashCard, order.field))
            for order in page_request.sort
        ]
        query = (
            select(CashCard)
            .order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(CashCard)
        )
        return result.scalar() or 0
