# Schemas package init
"""
CashCard Service — API Schemas
================================

What:  Pydantic models describing request bodies and response payloads.
"""
