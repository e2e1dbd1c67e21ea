"""Health endpoint router."""

from datetime import datetime

from fastapi import APIRouter, Depends

from mallu_api.app.dependencies import app_state, get_settings
from mallu_api.config.settings import APISettings
from mallu_api.schemas.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: APISettings = Depends(get_settings)):
    """Health check endpoint."""

    service = app_state.get("verification_service")
    startup_time = app_state.get("startup_time")
    now = datetime.now()

    checks = {
        "classifier": service is not None,
        "rate_limiter": app_state.get("rate_limiter") is not None or not settings.enable_rate_limit,
    }

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=settings.api_version,
        region=service.classifier.region.name if service else "unknown",
        timestamp=now,
        uptime_seconds=int((now - startup_time).total_seconds()) if startup_time else 0,
        checks=checks,
    )
