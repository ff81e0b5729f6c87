"""Dependency injection for the cashcards routes.

Pattern:
    - The SQL store is built per request around the request's AsyncSession
    - The memory store is created once by create_app() and kept in app.state
    - The service is built per request around whichever store is configured

Tests swap the database by overriding get_db_session, or the store itself by
overriding get_cash_card_store, through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.config import settings
from cashcard.database import get_db_session
from cashcard.repositories import CashCardStore, SqlCashCardStore
from cashcard.services.cash_card_service import CashCardService


def get_memory_store(request: Request) -> CashCardStore:
    """Return the in-memory store kept in app.state.

    Raises:
        RuntimeError: If the app was created without a memory store
    """
    store = getattr(request.app.state, "memory_store", None)
    if store is None:
        raise RuntimeError("Memory store not initialized. Check STORE_BACKEND and create_app().")
    return store


def get_cash_card_store(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> CashCardStore:
    """Return the Record Store selected by STORE_BACKEND.

    The session is requested either way; AsyncSession does not connect until
    it runs a statement, so the memory backend never touches the database.
    """
    if settings.store_backend == "memory":
        return get_memory_store(request)
    return SqlCashCardStore(db)


def get_cash_card_service(
    store: CashCardStore = Depends(get_cash_card_store),
) -> CashCardService:
    """Build the service around the request's Record Store."""
    return CashCardService(store)


# Type aliases for cleaner dependency injection
ServiceDep = Annotated[CashCardService, Depends(get_cash_card_service)]
