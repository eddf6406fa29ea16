# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Probes for load balancers and the container orchestrator:
# - /health: static info, never touches the store
# - /health/ready: pings the reference store
# - /health/live: process is up
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import settings
from app.dependencies import ReferenceStoreDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessChecks(BaseModel):
    """Per-dependency status strings."""
    reference_store: str


class ReadinessResponse(BaseModel):
    status: str
    checks: ReadinessChecks
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service name, version and environment."""
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(store: ReferenceStoreDep):
    """
    Ping the reference store.

    An unreachable store reports "degraded", not an error status: matching
    still answers with buckets and a style name, just without suggestions.
    """
    try:
        store.ping()
        store_status = "healthy"
    except Exception as e:
        store_status = f"unhealthy: {str(e)[:80]}"

    return ReadinessResponse(
        status="ready" if store_status == "healthy" else "degraded",
        checks=ReadinessChecks(reference_store=store_status),
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Always "alive" while the process can serve requests."""
    return LivenessResponse(status="alive", timestamp=_now())
