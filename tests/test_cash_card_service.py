"""
CashCard Service — CashCardService Unit Tests
===============================================

What:  Tests for CashCardService business logic (get, create, list, update, delete).
How:   Runs the service against the in-memory store, and against a mock
       store for failure injection (no database needed).

What we test:
    ✅ Missing records raise NotFoundError for get, update, delete
    ✅ Create ignores client ids and gets a fresh one
    ✅ Update keeps the id and replaces the amount
    ✅ SQLAlchemyError is wrapped in DatabaseError, never NotFoundError
"""

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from cashcard.exceptions import DatabaseError, NotFoundError
from cashcard.models.cash_card import CashCard
from cashcard.pagination import PageRequest, SortOrder
from cashcard.schemas.cash_card import CashCardRequest
from cashcard.services.cash_card_service import CashCardService


class TestCashCardServiceGet:
    """Tests for get_cash_card."""

    @pytest.mark.asyncio
    async def test_get_found(self, memory_store):
        service = CashCardService(memory_store)

        card = await service.get_cash_card(99)

        assert card.id == 99
        assert card.amount == 123.45

    @pytest.mark.asyncio
    async def test_get_not_found(self, memory_store):
        service = CashCardService(memory_store)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_cash_card(1000)

        assert exc_info.value.context["resource_id"] == 1000

    @pytest.mark.asyncio
    async def test_get_store_failure_is_database_error(self, mock_store):
        mock_store.lookup.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        service = CashCardService(mock_store)

        with pytest.raises(DatabaseError) as exc_info:
            await service.get_cash_card(99)

        assert exc_info.value.context["error_type"] == "OperationalError"


class TestCashCardServiceCreate:
    """Tests for create_cash_card."""

    @pytest.mark.asyncio
    async def test_create_assigns_new_id(self, memory_store):
        service = CashCardService(memory_store)

        card = await service.create_cash_card(CashCardRequest(amount=250.0))

        assert card.id not in (None, 99, 100, 101)
        assert (await memory_store.lookup(card.id)).amount == 250.0

    @pytest.mark.asyncio
    async def test_create_ignores_request_id(self, mock_store):
        mock_store.save.return_value = CashCard(id=7, amount=5.0)
        service = CashCardService(mock_store)

        await service.create_cash_card(CashCardRequest(id=99, amount=5.0))

        saved = mock_store.save.await_args.args[0]
        assert saved.id is None
        assert saved.amount == 5.0

    @pytest.mark.asyncio
    async def test_create_store_failure(self, mock_store):
        mock_store.save.side_effect = SQLAlchemyError("disk full")
        service = CashCardService(mock_store)

        with pytest.raises(DatabaseError):
            await service.create_cash_card(CashCardRequest(amount=5.0))


class TestCashCardServiceList:
    """Tests for list_cash_cards."""

    @pytest.mark.asyncio
    async def test_list_returns_page_and_total(self, memory_store):
        service = CashCardService(memory_store)

        cards, total = await service.list_cash_cards(PageRequest(page=0, size=2))

        assert [card.amount for card in cards] == [1.00, 123.45]
        assert total == 3

    @pytest.mark.asyncio
    async def test_list_passes_page_request_through(self, mock_store):
        service = CashCardService(mock_store)
        page_request = PageRequest(page=3, size=10, sort=(SortOrder("id", "desc"),))

        await service.list_cash_cards(page_request)

        mock_store.list_page.assert_awaited_once_with(page_request)

    @pytest.mark.asyncio
    async def test_list_store_failure(self, mock_store):
        mock_store.count.side_effect = SQLAlchemyError("timeout")
        service = CashCardService(mock_store)

        with pytest.raises(DatabaseError):
            await service.list_cash_cards(PageRequest())


class TestCashCardServiceUpdate:
    """Tests for update_cash_card."""

    @pytest.mark.asyncio
    async def test_update_keeps_id(self, memory_store):
        service = CashCardService(memory_store)

        card = await service.update_cash_card(99, CashCardRequest(id=5, amount=19.99))

        assert card.id == 99
        assert (await memory_store.lookup(99)).amount == 19.99
        assert await memory_store.lookup(5) is None

    @pytest.mark.asyncio
    async def test_update_not_found_creates_nothing(self, memory_store):
        service = CashCardService(memory_store)

        with pytest.raises(NotFoundError):
            await service.update_cash_card(999, CashCardRequest(amount=19.99))

        assert await memory_store.count() == 3

    @pytest.mark.asyncio
    async def test_update_not_found_never_saves(self, mock_store):
        service = CashCardService(mock_store)

        with pytest.raises(NotFoundError):
            await service.update_cash_card(999, CashCardRequest(amount=1.0))

        mock_store.save.assert_not_awaited()


class TestCashCardServiceDelete:
    """Tests for delete_cash_card."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, memory_store):
        service = CashCardService(memory_store)

        await service.delete_cash_card(99)

        assert await memory_store.lookup(99) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_found(self, memory_store):
        service = CashCardService(memory_store)

        with pytest.raises(NotFoundError):
            await service.delete_cash_card(99999)

    @pytest.mark.asyncio
    async def test_delete_store_failure_is_not_masked(self, mock_store):
        mock_store.delete.side_effect = SQLAlchemyError("deadlock")
        service = CashCardService(mock_store)

        with pytest.raises(DatabaseError):
            await service.delete_cash_card(99)
