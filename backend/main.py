"""
FastAPI application entry point for Hobby to Hustle backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.routes.courses import catalog_router as courses_router
from backend.routes.courses import router as learning_router
from backend.routes.health import router as health_router
from backend.routes.opportunities import router as opportunities_router
from backend.routes.recommendations import router as recommendations_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Headers the web client sends with function calls
CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins.

    The web client calls the suggestion functions from any origin, so the
    default is ["*"]. Set CORS_ORIGINS (comma-separated) to restrict it.
    """
    origins = settings.CORS_ORIGINS or ["*"]
    if "*" in origins:
        logger.info("CORS configured: allowing all origins")
        return ["*"]

    logger.info(f"CORS configured with {len(origins)} allowed origins")
    return origins


def _preflight_headers(origins: list[str]) -> dict[str, str]:
    """Headers returned by the explicit OPTIONS handler."""
    headers = {
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    }
    if len(origins) == 1:
        headers["Access-Control-Allow-Origin"] = origins[0]
    return headers


def _error_cors_headers(request: Request) -> dict[str, str]:
    """
    CORS headers for responses built by the unhandled-exception handler.

    That handler runs outside CORSMiddleware.
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}
    if "*" in cors_origins:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in cors_origins:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
            "Vary": "Origin",
        }
    return {}


# Create FastAPI app
app = FastAPI(
    title="Hobby to Hustle API",
    description="AI hustle ideas, live local opportunities and a learning hub",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    This helps diagnose 422 errors from the web client.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": exc.errors(),
        }
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort: a generic 500 without internals."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=True
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "details": "An unexpected error occurred. Please try again."
        },
        headers=_error_cors_headers(request)
    )


cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


# Register routers
app.include_router(health_router)
app.include_router(recommendations_router)
app.include_router(opportunities_router)
app.include_router(courses_router)
app.include_router(learning_router)


# Preflight requests that the CORS middleware does not intercept (e.g. no
# Access-Control-Request-Method header) still get an empty success response
@app.options("/{full_path:path}", include_in_schema=False)
async def preflight(full_path: str) -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=_preflight_headers(cors_origins))


logger.info("FastAPI app initialized successfully")
