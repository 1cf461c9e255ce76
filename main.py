import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from exceptions import (
    ChartCalculationError,
    InvalidCoordinatesError,
    InvalidDateTimeError,
)
from log_config import setup_logging
from routers import router
from settings import get_settings

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Natal chart calculation API: planet positions, whole-sign houses, aspects and interpretations",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception Handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing, wrong-typed or unparseable request fields."""
    logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"error": "missing required fields"}
    )


@app.exception_handler(InvalidDateTimeError)
async def invalid_datetime_handler(request: Request, exc: InvalidDateTimeError):
    """Civil time or timezone that does not resolve to an instant."""
    logger.info("invalid_datetime", path=request.url.path, reason=str(exc))
    return JSONResponse(
        status_code=400,
        content={"error": "invalid date or timezone"}
    )


@app.exception_handler(InvalidCoordinatesError)
async def invalid_coordinates_handler(request: Request, exc: InvalidCoordinatesError):
    """Handle invalid coordinates errors."""
    logger.info("invalid_coordinates", path=request.url.path, reason=str(exc))
    return JSONResponse(
        status_code=400,
        content={"error": "invalid coordinates"}
    )


@app.exception_handler(ChartCalculationError)
async def chart_calculation_error_handler(request: Request, exc: ChartCalculationError):
    """Handle chart calculation errors."""
    logger.error("chart_calculation_failed", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc)}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all other unexpected exceptions."""
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "An unexpected error occurred"}
    )


# Include API router
app.include_router(router, prefix="/api", tags=["API"])


# Root endpoints
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
