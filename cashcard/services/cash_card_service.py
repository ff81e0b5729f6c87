"""
CashCard Service — CashCard Service (Business Logic)
======================================================

What:  Get, create, list, update and delete operations on cash cards.
Why:   Keeps Record Store calls and existence checks out of the route
       handlers, which only deal with HTTP.
How:   Wraps an injected CashCardStore. Missing records become NotFoundError,
       persistence faults become DatabaseError.
Who:   Built per request by cashcard.dependencies.get_cash_card_service.

Design Decision:
    The service receives its store through the constructor instead of
    reaching for a module-level session. The same service runs unchanged
    against the SQL table, the in-memory dict, or a mock in tests.
"""

import logging
from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError

from cashcard.exceptions import DatabaseError, NotFoundError
from cashcard.models.cash_card import CashCard
from cashcard.pagination import PageRequest
from cashcard.repositories.base import CashCardStore
from cashcard.schemas.cash_card import CashCardRequest

logger = logging.getLogger(__name__)

RESOURCE = "cash card"


class CashCardService:
    """
    Business logic layer for cash card operations.

    Error Handling Strategy:
        NotFoundError propagates as-is. SQLAlchemyError from the store is
        logged with its type and wrapped in DatabaseError so internals never
        reach the client. Anything else propagates to the catch-all handler.
    """

    def __init__(self, store: CashCardStore):
        self.store = store

    async def get_cash_card(self, card_id: int) -> CashCard:
        """
        Retrieve a single cash card by id.

        Raises:
            NotFoundError: No record with this id (→ 404)
            DatabaseError: Store query failed (→ 500)
        """
        try:
            card = await self.store.lookup(card_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching cash card %s: %s", card_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the cash card.",
                context={"card_id": card_id, "error_type": type(e).__name__},
            ) from e

        if card is None:
            raise NotFoundError(resource=RESOURCE, resource_id=card_id)
        return card

    async def create_cash_card(self, request: CashCardRequest) -> CashCard:
        """
        Persist a new cash card and return it with its store-assigned id.

        Any id in the request is dropped; the store always picks a fresh one.
        """
        try:
            card = await self.store.save(CashCard(amount=request.amount))
        except SQLAlchemyError as e:
            logger.error("Database error creating cash card: %s", str(e))
            raise DatabaseError(
                message="Could not create the cash card.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Created cash card %s", card.id)
        return card

    async def list_cash_cards(self, page_request: PageRequest) -> Tuple[List[CashCard], int]:
        """
        Return one page of cash cards and the size of the whole collection.

        The page order comes from page_request.sort, which always ends in a
        unique key, so repeated calls without writes in between return the
        same records in the same order.
        """
        try:
            cards = await self.store.list_page(page_request)
            total_count = await self.store.count()
        except SQLAlchemyError as e:
            logger.error("Database error listing cash cards: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve cash cards.",
                context={"error_type": type(e).__name__},
            ) from e

        return cards, total_count

    async def update_cash_card(self, card_id: int, request: CashCardRequest) -> CashCard:
        """
        Replace the amount of an existing cash card, keeping its id.

        Raises:
            NotFoundError: No record with this id; nothing is created (→ 404)
            DatabaseError: Store operation failed (→ 500)
        """
        try:
            existing = await self.store.lookup(card_id)
            if existing is None:
                raise NotFoundError(resource=RESOURCE, resource_id=card_id)

            existing.amount = request.amount
            card = await self.store.save(existing)
        except SQLAlchemyError as e:
            logger.error("Database error updating cash card %s: %s", card_id, str(e))
            raise DatabaseError(
                message="Could not update the cash card.",
                context={"card_id": card_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Updated cash card %s", card.id)
        return card

    async def delete_cash_card(self, card_id: int) -> None:
        """
        Delete a cash card.

        Raises:
            NotFoundError: No record with this id (→ 404)
            DatabaseError: Store operation failed (→ 500)
        """
        try:
            deleted = await self.store.delete(card_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting cash card %s: %s", card_id, str(e))
            raise DatabaseError(
                message="Could not delete the cash card.",
                context={"card_id": card_id, "error_type": type(e).__name__},
            ) from e

        if not deleted:
            raise NotFoundError(resource=RESOURCE, resource_id=card_id)
        logger.info("Deleted cash card %s", card_id)
