"""
CashCard Service — Page and Sort Parameters
=============================================

What:  Turns the `page`, `size` and `sort` query parameters of GET /cashcards
       into a PageRequest the Record Store understands.
Why:   Keeps query-string parsing out of both the route (HTTP only) and the
       stores (persistence only), so every store pages and sorts identically.

Sort syntax (one or more `sort` parameters):
    sort=amount             → amount ascending
    sort=amount,desc        → amount descending
    sort=amount,id,desc     → amount descending, then id descending
    sort=amount,desc&sort=id → amount descending, then id ascending

    Directions are case-insensitive. A trailing token that is not a direction
    is treated as another field, sorted ascending.

Defaults:
    No sort      → amount ascending
    No size      → the whole collection on page 0, nothing on later pages
    Tie-break    → id ascending, appended unless the client already sorts by id
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from cashcard.exceptions import ValidationError
from cashcard.models.cash_card import ID_MAX, CashCard

ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)


@dataclass(frozen=True)
class SortOrder:
    """One ORDER BY key: a CashCard column name and a direction."""

    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC


DEFAULT_SORT = (SortOrder("amount", ASC),)
TIE_BREAKER = SortOrder("id", ASC)


@dataclass(frozen=True)
class PageRequest:
    """
    A zero-based page of the collection in a fixed order.

    Attributes:
        page:  Page index (0 = first page)
        size:  Records per page, or None for "everything from offset 0"
        sort:  Ordered sort keys, tie-breaker included
    """

    page: int = 0
    size: Optional[int] = None
    sort: Tuple[SortOrder, ...] = DEFAULT_SORT + (TIE_BREAKER,)

    @property
    def offset(self) -> int:
        if self.size is None:
            return 0
        return self.page * self.size

    @property
    def limit(self) -> Optional[int]:
        # An unbounded page 0 holds every record, so later pages are empty
        if self.size is None:
            return None if self.page == 0 else 0
        return self.size


def parse_sort(values: Optional[Sequence[str]]) -> Tuple[SortOrder, ...]:
    """
    Parse raw `sort` query values into SortOrders.

    Returns DEFAULT_SORT plus the id tie-breaker when no usable value was given.

    Raises:
        ValidationError: A field is not sortable.
    """
    orders: List[SortOrder] = []
    for raw in values or ():
        tokens = [token.strip() for token in raw.split(",") if token.strip()]
        if not tokens:
            continue

        direction = ASC
        if len(tokens) > 1 and tokens[-1].lower() in DIRECTIONS:
            direction = tokens.pop().lower()

        for name in tokens:
            if name not in CashCard.SORTABLE_FIELDS:
                raise ValidationError(
                    message=f"Cannot sort by '{name}'. Sortable fields: {', '.join(CashCard.SORTABLE_FIELDS)}",
                    field="sort",
                    context={"value": raw},
                )
            orders.append(SortOrder(name, direction))

    if not orders:
        orders = list(DEFAULT_SORT)

    if not any(order.field == TIE_BREAKER.field for order in orders):
        orders.append(TIE_BREAKER)

    return tuple(orders)


def build_page_request(
    page: int = 0,
    size: Optional[int] = None,
    sort: Optional[Sequence[str]] = None,
    max_page_size: Optional[int] = None,
) -> PageRequest:
    """
    Validate paging inputs and assemble a PageRequest.

    Raises:
        ValidationError: Negative page, non-positive size, size above
                         max_page_size, an offset past the 64-bit range
                         SQL drivers accept, or an unsortable field.
    """
    if page < 0:
        raise ValidationError(message="page must not be negative", field="page", context={"value": page})
    if size is not None:
        if size < 1:
            raise ValidationError(message="size must be at least 1", field="size", context={"value": size})
        if max_page_size is not None and size > max_page_size:
            raise ValidationError(
                message=f"size must not exceed {max_page_size}",
                field="size",
                context={"value": size, "max": max_page_size},
            )
        if (page + 1) * size > ID_MAX:
            raise ValidationError(
                message="page and size reach past the last addressable row",
                field="page",
                context={"value": page, "size": size},
            )
    return PageRequest(page=page, size=size, sort=parse_sort(sort))
