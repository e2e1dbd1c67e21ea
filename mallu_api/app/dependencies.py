"""Shared application state and FastAPI dependencies."""

from fastapi import HTTPException, Request, status

from mallu_api.config.settings import APISettings
from mallu_api.services.verification_service import VerificationService
from mallu_api.utils.metrics import metrics
from mallu_api.utils.rate_limiter import RateLimiter


# Global application state
app_state = {
    "settings": None,
    "verification_service": None,
    "rate_limiter": None,
    "startup_time": None
}


def get_settings() -> APISettings:
    """Get application settings."""
    settings = app_state.get("settings")
    if not settings:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Settings not initialized"
        )
    return settings


def get_verification_service() -> VerificationService:
    """Get verification service."""
    service = app_state.get("verification_service")
    if not service:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Verification service not initialized"
        )
    return service


async def check_rate_limit(request: Request):
    """Check rate limiting per client address."""

    rate_limiter: RateLimiter = app_state.get("rate_limiter")
    if not rate_limiter:
        return  # Rate limiting disabled

    client_id = f"client:{request.client.host if request.client else 'unknown'}"

    if not rate_limiter.is_allowed(client_id):
        settings = app_state.get("settings")
        if settings and settings.enable_metrics:
            metrics.rate_limited_requests.inc()

        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded",
            headers={"Retry-After": str(rate_limiter.retry_after(client_id))}
        )
