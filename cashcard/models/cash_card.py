"""
CashCard Service — CashCard SQLAlchemy Model
==============================================

What:  ORM model representing the `cash_cards` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by SqlCashCardStore for CRUD operations, by InMemoryCashCardStore
       as its record type, and by Alembic for schema management.

Table Design:
    - 64-bit primary key assigned by the database (autoincrement/identity).
      SQLite keeps plain INTEGER, the only type it autoincrements, which is
      64-bit there anyway.
      Clients never choose ids; create requests that carry one are ignored.
    - amount: double precision, no range constraint. Any JSON number a client
      sends is stored as-is.
"""

from typing import Optional

from sqlalchemy import BigInteger, Double, Integer
from sqlalchemy.orm import Mapped, mapped_column

from cashcard.database import Base

# Range of a signed 64-bit BIGINT, the widest id either backend can store
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class CashCard(Base):
    """
    A cash card record.

    Lifecycle:
        1. Created by POST /cashcards (id assigned on flush)
        2. Read by GET /cashcards/{id} or listed by GET /cashcards
        3. amount replaced by PUT /cashcards/{id}; id never changes
        4. Removed by DELETE /cashcards/{id} (hard delete)
    """

    __tablename__ = "cash_cards"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    amount: Mapped[float] = mapped_column(
        Double,
        nullable=False,
        comment="Card balance",
    )

    # Columns a client may sort the listing by
    SORTABLE_FIELDS = ("id", "amount")

    def __init__(self, amount: float, id: Optional[int] = None):
        super().__init__(id=id, amount=amount)

    def __repr__(self) -> str:
        return f"<CashCard(id={self.id}, amount={self.amount})>"
