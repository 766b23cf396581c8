"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from tracker.schemas.health import HealthResponse
from tracker.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status and server time."""
    return HealthResponse(status="ok", timestamp=utc_now())
