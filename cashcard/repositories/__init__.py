# Repositories package init
"""
CashCard Service — Record Stores
==================================

What:  Persistence implementations of the CashCardStore protocol.
"""

from cashcard.repositories.base import CashCardStore
from cashcard.repositories.memory_store import InMemoryCashCardStore
from cashcard.repositories.sql_store import SqlCashCardStore

__all__ = ["CashCardStore", "InMemoryCashCardStore", "SqlCashCardStore"]
