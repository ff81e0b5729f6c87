"""Record Store protocol.

Defines the persistence capability the cashcards handler depends on. Any
object with these coroutines satisfies it, no inheritance needed:

- SqlCashCardStore: the `cash_cards` table through async SQLAlchemy (default)
- InMemoryCashCardStore: a dict, for tests and throwaway local runs
"""

from typing import List, Optional, Protocol, runtime_checkable

from cashcard.models.cash_card import CashCard
from cashcard.pagination import PageRequest


@runtime_checkable
class CashCardStore(Protocol):
    """Protocol for CashCard persistence backends.

    Consistency guarantees (unique ids, atomic single-record writes) belong
    to the implementation; callers never lock.
    """

    async def lookup(self, card_id: int) -> Optional[CashCard]:
        """Fetch one record.

        Args:
            card_id: Identifier to look up

        Returns:
            The record, or None when no record has that id
        """
        ...

    async def save(self, card: CashCard) -> CashCard:
        """Insert or overwrite a record.

        Args:
            card: Record with id None (insert, id assigned by the store)
                  or an existing id (overwrite that record)

        Returns:
            The persisted record, id populated
        """
        ...

    async def delete(self, card_id: int) -> bool:
        """Remove a record.

        Args:
            card_id: Identifier to delete

        Returns:
            True if a record was removed, False if none had that id
        """
        ...

    async def list_page(self, page_request: PageRequest) -> List[CashCard]:
        """Return one page of records in the requested order.

        Args:
            page_request: Page index, optional size, and sort keys

        Returns:
            Records of that page, possibly empty
        """
        ...

    async def count(self) -> int:
        """Count every record in the store."""
        ...
