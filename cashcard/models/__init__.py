# Models package init
"""
CashCard Service — ORM Models
===============================

What:  SQLAlchemy models mapped onto the relational schema.
Who:   Imported by the SQL Record Store, Alembic, and create_tables().
"""
