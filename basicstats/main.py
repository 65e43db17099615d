"""FastAPI application exposing the statistics engine over HTTP."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from basicstats.api import health, stats
from basicstats.config import INITIAL_CAPACITY
from basicstats.errors import AllocationError, BasicStatsError
from basicstats.observability.logging import setup_logging
from basicstats.observability.metrics import STATS_ERRORS, metrics_router, record_request_metrics
from basicstats.services.buffer import NumericBuffer

logger = logging.getLogger(__name__)


def check_buffer_config(initial_capacity: int) -> Optional[str]:
    """Return why a buffer of ``initial_capacity`` slots cannot be built, or None."""
    try:
        NumericBuffer(initial_capacity)
    except (ValueError, AllocationError) as exc:
        return str(exc)
    return None


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    # Ready only once a buffer of the configured size has been built
    reason = check_buffer_config(app.state.initial_capacity)
    if reason is not None:
        logger.error("Initial capacity %s rejected: %s", app.state.initial_capacity, reason)
    app.state.not_ready_reason = reason
    yield
    app.state.not_ready_reason = "shutting down"


def create_app(initial_capacity: int = INITIAL_CAPACITY) -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="Basic Statistics Service",
        version="1.0.0",
        lifespan=app_lifespan,
    )
    app.state.initial_capacity = initial_capacity
    app.state.not_ready_reason = "starting up"

    app.middleware("http")(record_request_metrics)
    app.include_router(metrics_router)
    app.include_router(health.router)
    app.include_router(stats.router)

    @app.exception_handler(BasicStatsError)
    async def stats_error_handler(request: Request, exc: BasicStatsError):
        # Running out of memory is the server's problem, everything else is the input's
        status_code = 503 if isinstance(exc, AllocationError) else 400
        STATS_ERRORS.labels(type(exc).__name__).inc()
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies get the same 400 as inputs the engine rejects
        detail = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "ValidationError", "detail": detail})

    return app


app = create_app()
