from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: 200 while the process can answer at all."""
    return {"status": "ok"}

@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    200 with the buffer's initial capacity once startup has verified it,
    503 with the reason otherwise (bad BASICSTATS_INITIAL_CAPACITY, startup, shutdown).
    """
    state = request.app.state
    if state.not_ready_reason is None:
        return {"status": "ready", "initial_capacity": state.initial_capacity}
    return JSONResponse(
        {"status": "not ready", "reason": state.not_ready_reason},
        status_code=HTTP_503_SERVICE_UNAVAILABLE,
    )
