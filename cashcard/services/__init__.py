# Services package init
"""
CashCard Service — Services Layer
===================================

What:  Business logic layer sitting between routes (HTTP) and Record Stores
       (persistence).
How:   Services receive their store through the constructor and are built
       per request by FastAPI's dependency injection (cashcard.dependencies).

Service Inventory:
    - CashCardService: existence checks and error translation for the
      cashcards resource
"""
