import logging
import math

from fastapi import APIRouter, Request

from basicstats.api.schemas import StatsIn, StatsOut
from basicstats.errors import NonFiniteResultError
from basicstats.observability.metrics import SUMMARIZED_VALUES
from basicstats.services.buffer import NumericBuffer
from basicstats.services.stats import summarize

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/stats", response_model=StatsOut)
async def analyze(body: StatsIn, request: Request):
    """
    Accepts a JSON payload with 'numbers'.
    Returns mean, median, mode, population stddev and harmonic mean.
    Engine errors (BasicStatsError) are turned into 400 responses by the app.
    """
    # Each request owns its buffer; nothing is shared between requests
    buffer = NumericBuffer(request.app.state.initial_capacity)
    buffer.extend(body.numbers)
    buffer.sort()
    try:
        summary = summarize(buffer)
    except ArithmeticError as exc:
        raise NonFiniteResultError(f"statistics overflowed: {exc}") from exc

    # JSON has no inf/nan; the CLI prints them, the API refuses them
    for name, value in summary.items():
        if isinstance(value, float) and not math.isfinite(value):
            raise NonFiniteResultError(f"{name} is not finite for this input")

    SUMMARIZED_VALUES.observe(len(buffer))
    logger.info("Summarized %d values", len(buffer))
    return StatsOut(**summary)
