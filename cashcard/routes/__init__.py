# Routes package init
"""
CashCard Service — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - cash_cards.py:  GET/POST      /cashcards
                      GET/PUT/DELETE /cashcards/{id}
    - health.py:      GET /health

Design Principle:
    Routes are THIN: they read the request, call CashCardService, and pick
    the status code and headers. Existence checks and error translation
    live in the service.
"""
