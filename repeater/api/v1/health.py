"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from repeater import __version__
from repeater.api.deps import RegistryDep, SettingsDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    environment: str
    styles: int
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, registry: RegistryDep) -> HealthResponse:
    """Check API health and that the style catalog is loaded."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.app_env,
        styles=len(registry),
        timestamp=datetime.now(timezone.utc),
    )
