"""
CashCard Service — Health Check Route
=======================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Load balancers use this to route away from instances that cannot
       reach their Record Store.
How:   For the SQL backend, runs a COUNT on cash_cards over a pooled
       connection of its own (outside any request session). The memory
       backend has nothing to probe and always reports healthy.

Status levels:
    - healthy:   Record Store reachable (HTTP 200)
    - unhealthy: Record Store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from cashcard import __version__
from cashcard.config import settings
from cashcard.database import engine
from cashcard.models.cash_card import CashCard
from cashcard.schemas.cash_card import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Record Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check that the Record Store answers a lightweight query.

    COUNT(*) on cash_cards is cheap enough to run on every probe and, unlike
    SELECT 1, also proves the table exists.
    """
    overall = "healthy"
    database = "memory"

    if settings.store_backend == "sql":
        database = "connected"
        try:
            async with engine.connect() as conn:
                await conn.execute(select(func.count()).select_from(CashCard))
        except (SQLAlchemyError, OSError) as e:
            overall = "unhealthy"
            database = "disconnected"
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=database,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
