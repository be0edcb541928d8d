"""Health check endpoints router for monitoring service availability."""

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from storefront.api.http.deps import get_database_service
from storefront.api.http.schemas import HealthResponse
from storefront.core.services import MongoConnectionService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe: 200 while the process is up, no dependency checks."""
    return HealthResponse(status="healthy")


@router.get("/ready", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
def readiness(
    database: MongoConnectionService = Depends(get_database_service),
) -> HealthResponse | JSONResponse:
    """Readiness probe: 503 until the database answers a ping."""
    if not database.health_check():
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return HealthResponse(status="ready")
