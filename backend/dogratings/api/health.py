"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from dogratings.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check with record store status."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        return HealthResponse(
            status="unhealthy",
            uptime_seconds=round(time.time() - _start_time, 2),
            message="record store not initialized",
        )

    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
        records=store.counts(),
    )
