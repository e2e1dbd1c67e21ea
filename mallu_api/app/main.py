"""Main FastAPI application for the Mallu Card API."""

import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from mallu_card.core.classifier import RegionClassifier
from mallu_card.models.config import KERALA
from mallu_api.app.dependencies import app_state, get_settings
from mallu_api.app.routers import health, share, verify
from mallu_api.config.settings import APISettings
from mallu_api.errors import VerificationRequestError
from mallu_api.services.verification_service import VerificationService
from mallu_api.utils.logging import setup_logging
from mallu_api.utils.metrics import metrics, setup_metrics
from mallu_api.utils.rate_limiter import RateLimiter


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""

    logger = structlog.get_logger(__name__)
    settings: APISettings = app.state.settings

    logger.info("Starting Mallu Card API")

    try:
        app_state["settings"] = settings
        app_state["verification_service"] = VerificationService(RegionClassifier(KERALA))

        if settings.enable_rate_limit:
            app_state["rate_limiter"] = RateLimiter(
                max_requests=settings.rate_limit_requests,
                window_seconds=settings.rate_limit_window
            )
        else:
            app_state["rate_limiter"] = None

        app_state["startup_time"] = datetime.now()

        logger.info("Mallu Card API started successfully", region=KERALA.name)

    except Exception as e:
        logger.error(f"Failed to start API: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down Mallu Card API")
    for key in app_state:
        app_state[key] = None


def _error_response(request: Request, status_code: int, code: str, message: str,
                    headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "timestamp": datetime.now().isoformat(),
                "request_id": getattr(request.state, "request_id", "unknown")
            }
        },
        headers=headers
    )


def _endpoint_label(request: Request) -> str:
    """Route template for metric labels; raw paths would grow series without bound."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


def create_app(settings: Optional[APISettings] = None) -> FastAPI:
    """Create and configure FastAPI application."""

    settings = settings or APISettings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
    )

    if settings.enable_metrics:
        setup_metrics(app, settings.metrics_path)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Request logging middleware."""
        logger = structlog.get_logger(__name__)

        request.state.request_id = uuid.uuid4().hex
        start_time = time.time()

        if settings.access_log:
            logger.info("Request started",
                        method=request.method,
                        path=request.url.path,
                        request_id=request.state.request_id,
                        client_ip=request.client.host if request.client else None)

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error("Request failed",
                         method=request.method,
                         path=request.url.path,
                         error=str(e),
                         process_time=process_time)

            if settings.enable_metrics:
                metrics.request_count.labels(
                    method=request.method,
                    endpoint=_endpoint_label(request),
                    status=500
                ).inc()

            raise

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request.state.request_id

        if settings.access_log:
            logger.info("Request completed",
                        method=request.method,
                        path=request.url.path,
                        status_code=response.status_code,
                        process_time=process_time)

        if settings.enable_metrics:
            metrics.request_count.labels(
                method=request.method,
                endpoint=_endpoint_label(request),
                status=response.status_code
            ).inc()

            metrics.request_duration.labels(
                method=request.method,
                endpoint=_endpoint_label(request)
            ).observe(process_time)

        return response

    # Include routers
    app.include_router(verify.router, prefix="/api", tags=["verification"])
    app.include_router(share.router, prefix="/api", tags=["share"])
    app.include_router(health.router, prefix="/api", tags=["health"])

    @app.exception_handler(VerificationRequestError)
    async def verification_error_handler(request: Request, exc: VerificationRequestError):
        """Handle rejected verification requests."""
        return _error_response(request, exc.status_code, exc.code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        logger = structlog.get_logger(__name__)
        logger.warning("HTTP exception",
                       status_code=exc.status_code,
                       detail=exc.detail,
                       path=request.url.path)

        return _error_response(
            request, exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger = structlog.get_logger(__name__)
        logger.error("Unhandled exception",
                     error=str(exc),
                     path=request.url.path,
                     exc_info=True)

        return _error_response(request, 500, "INTERNAL_SERVER_ERROR", "Failed to process verification")

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        startup_time = app_state.get("startup_time")
        current_settings = get_settings()

        return {
            "service": "Mallu Card API",
            "version": current_settings.api_version,
            "status": "operational",
            "startup_time": startup_time.isoformat() if startup_time else None,
            "documentation": "/docs" if current_settings.debug else "Contact administrator",
            "endpoints": {
                "verify": "/api/verify-proof",
                "verify_raw": "/api/verify-proof/raw",
                "share": "/api/share/{tier_code}",
                "health": "/api/health"
            }
        }

    return app

