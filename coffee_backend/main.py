"""
FastAPI application entry point for the Code & Coffee backend.

This module creates the FastAPI app instance, registers the error handlers
and all routers.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coffee_backend.config import settings
from coffee_backend.routes.health import router as health_router
from coffee_backend.routes.quiz import router as quiz_router
from coffee_backend.routes.quiz_responses import router as quiz_responses_router
from coffee_backend.routes.recommendations import router as recommendations_router
from coffee_backend.utils.errors import format_validation_errors

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Error messages used when an HTTPException carries a plain string detail
_DEFAULT_ERROR_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (empty means no web origins)
    - Anything else: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the quiz frontend."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Code & Coffee API",
    description="Backend for the Code & Coffee developer flavor profiler quiz",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render every HTTP error as {error, status, details?}.

    Routes raise HTTPException with a dict detail that already has this
    shape; framework errors (404, 405) carry a plain string.
    """
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {
            "error": _DEFAULT_ERROR_MESSAGES.get(exc.status_code, str(exc.detail)),
            "status": exc.status_code,
        }

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Body validation failures are client errors: 400, not FastAPI's default 422.
    """
    details = format_validation_errors(exc.errors())
    logger.info(f"Validation error on {request.method} {request.url.path}: {details}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "status": status.HTTP_400_BAD_REQUEST,
            "details": details,
        }
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(quiz_router)
app.include_router(recommendations_router)
app.include_router(quiz_responses_router)

logger.info("FastAPI app initialized successfully")
