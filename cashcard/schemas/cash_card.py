"""
CashCard Service — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract for the cashcards resource.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       ORM objects through them (from_attributes).

Design Decision:
    Schemas are separate from SQLAlchemy models because the request shape
    tolerates an `id` the server ignores, while the response always has one.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CashCardRequest(BaseModel):
    """
    What:  Body of POST /cashcards and PUT /cashcards/{id}.

    The id field exists so clients can send back a representation they
    fetched earlier; the server never reads it. Ids come from the Record
    Store on create and from the URL path on update.
    """
    id: Optional[int] = Field(default=None, description="Ignored by the server")
    # NaN and Infinity parse from JSON but cannot be stored or compared
    amount: float = Field(description="Card balance", allow_inf_nan=False)


class CashCardResponse(BaseModel):
    """
    What:  Representation returned by GET /cashcards/{id} and, as array
           items, by GET /cashcards.
    """
    id: int = Field(description="Store-assigned identifier")
    amount: float = Field(description="Card balance")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and Record Store status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Record Store connectivity: connected, disconnected, memory")
    uptime_seconds: float = Field(description="Seconds since service started")
