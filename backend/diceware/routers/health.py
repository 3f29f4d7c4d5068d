"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from diceware.config import Settings, get_settings
from diceware.services.generator import GeneratorPool, get_generator_pool
from diceware.services.telemetry import get_counters_snapshot

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    pool: GeneratorPool = Depends(get_generator_pool),
    active_settings: Settings = Depends(get_settings),
):
    """
    Readiness probe.
    Returns 200 once the configured word list is usable, 503 otherwise.
    """
    template = pool.template(active_settings)
    ready = template.is_valid()

    response_data = {
        "status": "healthy" if ready else "unhealthy",
        "checks": {
            "wordlist": "loaded" if ready else "unavailable",
            "wordlist_size": template.wordlist_size,
        },
        "counters": get_counters_snapshot(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if ready:
        return response_data
    return JSONResponse(status_code=503, content=response_data)
