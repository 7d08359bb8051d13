"""
Main FastAPI application entry point for Paged Resources.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from paged_resources.api.router import api_router
from paged_resources.core.config import settings
from paged_resources.core.exceptions import PagedResourcesException
from paged_resources.utils.error_handling import ErrorResponse

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("paged_resources")

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)


# Set up CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Register exception handlers
@app.exception_handler(PagedResourcesException)
async def paged_resources_exception_handler(request: Request, exc: PagedResourcesException):
    """Custom exception handler for PagedResourcesException."""
    logger.info(f"{request.method} {request.url.path} failed: {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_exception(exc),
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Enhanced HTTP exception handler with consistent format."""
    # Already shaped by handle_exception
    if isinstance(exc.detail, dict) and exc.detail.get("status") == "error":
        content = exc.detail
    else:
        content = ErrorResponse.from_exception(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )

# Register routers
app.include_router(api_router, prefix=settings.API_PREFIX)

# Root endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint for health checks."""
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
    }

if __name__ == "__main__":
    # For debugging only - use uvicorn for production
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
