"""
CashCard Service — Application Package Initializer
====================================================

What: Marks the `cashcard` directory as a Python package.
Who:  Imported by uvicorn (cashcard.main:app), Alembic, and pytest.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← existence checks, error translation
    ├─────────────────────────────────────┤
    │     Record Stores (Persistence)     │  ← SQL table or in-memory dict
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
