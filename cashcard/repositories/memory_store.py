"""In-memory Record Store.

Keeps amounts in a dict keyed by id. Records handed out are fresh CashCard
instances, so callers cannot change stored state without calling save().
No method awaits between reading and writing the dict, which makes every
operation atomic on a single event loop.
"""

from typing import Dict, Iterable, List, Optional

from cashcard.models.cash_card import CashCard
from cashcard.pagination import PageRequest


class InMemoryCashCardStore:
    """CashCardStore backed by a process-local dict."""

    def __init__(self, cards: Iterable[CashCard] = ()):
        self._amounts: Dict[int, float] = {}
        self._last_id = 0
        for card in cards:
            self._put(card)

    def _put(self, card: CashCard) -> CashCard:
        card_id = self._last_id + 1 if card.id is None else card.id
        self._last_id = max(self._last_id, card_id)
        self._amounts[card_id] = card.amount
        return CashCard(id=card_id, amount=card.amount)

    async def lookup(self, card_id: int) -> Optional[CashCard]:
        if card_id not in self._amounts:
            return None
        return CashCard(id=card_id, amount=self._amounts[card_id])

    async def save(self, card: CashCard) -> CashCard:
        return self._put(card)

    async def delete(self, card_id: int) -> bool:
        return self._amounts.pop(card_id, None) is not None

    async def list_page(self, page_request: PageRequest) -> List[CashCard]:
        cards = [
            CashCard(id=card_id, amount=amount)
            for card_id, amount in sorted(self._amounts.items())
        ]
        # Stable sort: apply keys from least to most significant
        for order in reversed(page_request.sort):
            cards.sort(key=lambda card: getattr(card, order.field), reverse=order.descending)

        start = page_request.offset
        if page_request.limit is None:
            return cards[start:]
        return cards[start:start + page_request.limit]

    async def count(self) -> int:
        return len(self._amounts)
