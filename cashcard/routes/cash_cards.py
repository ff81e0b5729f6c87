"""
CashCard Service — CashCard Route Handlers
============================================

What:  HTTP surface of the `/cashcards` collection.
Why:   Maps verbs, path ids and query parameters onto CashCardService calls
       and the service's results onto status codes and headers.
How:   Thin handlers; the service raises NotFoundError / ValidationError /
       DatabaseError and the global handlers in main.py turn them into
       empty-bodied 404 / 400 / 500 responses.

Route Inventory:
    GET    /cashcards/{id}   → 200 {id, amount}          | 404
    POST   /cashcards        → 201 + Location            | 400
    GET    /cashcards        → 200 [{id, amount}, ...]   | 400
    PUT    /cashcards/{id}   → 204                       | 404
    DELETE /cashcards/{id}   → 204                       | 404
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Path, Query, Request, Response, status

from cashcard.config import settings
from cashcard.dependencies import ServiceDep
from cashcard.models.cash_card import ID_MAX, ID_MIN
from cashcard.pagination import build_page_request
from cashcard.schemas.cash_card import CashCardRequest, CashCardResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cashcards", tags=["CashCards"])

EMPTY_404 = {404: {"description": "No cash card with this id (empty body)"}}
EMPTY_400 = {400: {"description": "Malformed request (empty body)"}}

# Ids outside BIGINT cannot exist; rejecting them here keeps them away from the driver
CardId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX, description="Cash card id")]


@router.get(
    "/{card_id}",
    response_model=CashCardResponse,
    responses={**EMPTY_404, **EMPTY_400},
    summary="Get a cash card by id",
)
async def get_cash_card(card_id: CardId, service: ServiceDep) -> CashCardResponse:
    card = await service.get_cash_card(card_id)
    return CashCardResponse.model_validate(card)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={201: {"description": "Created; Location header points at the new card"}, **EMPTY_400},
    summary="Create a cash card",
)
async def create_cash_card(
    body: CashCardRequest,
    request: Request,
    service: ServiceDep,
) -> Response:
    """
    Create a cash card.

    The store assigns the id; an id in the body is ignored. The response has
    no body, only a Location header with the absolute URI of the new card,
    which a client can GET directly.
    """
    card = await service.create_cash_card(body)
    location = request.url_for("get_cash_card", card_id=card.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.get(
    "",
    response_model=List[CashCardResponse],
    responses=EMPTY_400,
    summary="List cash cards, paginated and sorted",
    description=(
        "Returns one page of cash cards as a JSON array. Without `size` the whole "
        "collection is returned. `sort` takes `field` or `field,asc|desc` and may be "
        "repeated; the default is ascending by amount. The total number of cards is "
        "sent in the X-Total-Count header."
    ),
)
async def list_cash_cards(
    response: Response,
    service: ServiceDep,
    page: int = Query(default=0, le=ID_MAX, description="Zero-based page index"),
    size: Optional[int] = Query(default=None, description="Page size; omit for the whole collection"),
    sort: Optional[List[str]] = Query(
        default=None,
        description="Sort key as field[,asc|desc]; fields: id, amount",
    ),
) -> List[CashCardResponse]:
    page_request = build_page_request(
        page=page,
        size=size,
        sort=sort,
        max_page_size=settings.max_page_size,
    )
    cards, total_count = await service.list_cash_cards(page_request)

    response.headers["X-Total-Count"] = str(total_count)
    return [CashCardResponse.model_validate(card) for card in cards]


@router.put(
    "/{card_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**EMPTY_404, **EMPTY_400},
    summary="Replace the amount of a cash card",
)
async def update_cash_card(
    card_id: CardId,
    body: CashCardRequest,
    service: ServiceDep,
) -> Response:
    """
    Overwrite the amount of an existing card. The id comes from the path;
    an id in the body is ignored. Unknown ids get 404 and nothing is created.
    """
    await service.update_cash_card(card_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{card_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**EMPTY_404, **EMPTY_400},
    summary="Delete a cash card",
)
async def delete_cash_card(card_id: CardId, service: ServiceDep) -> Response:
    await service.delete_cash_card(card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
