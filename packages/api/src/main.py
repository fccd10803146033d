# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

import uvicorn
from db import get_db_service
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .core.logging import setup_logging
from .routes import feedback, health, public
from .schemas.error import ErrorResponse
from .services.feedback import init_feedback_recorder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    setup_logging(settings.LOG_LEVEL)
    db_service = get_db_service()

    healthy, message = await db_service.health_check()
    if healthy:
        logger.info("Connected to database")
    else:
        logger.error("Error acquiring database connection: %s", message)

    init_feedback_recorder(db_service.session_factory, settings.FEEDBACK_MAX_LENGTH)
    yield
    await db_service.dispose()


app = FastAPI(
    title="Apartment Cost Analyzer API",
    description="Move-in affordability calculator and user feedback collection",
    version=__version__,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE"],
    allow_headers=["X-Requested-With", "Content-Type", "Authorization"],
)


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTPException as ``{"error": detail}``."""
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body is not a JSON object (or not JSON at all)."""
    logger.debug("Malformed body (request_id=%s): %s", _request_id(request), exc.errors())
    return _error(400, "Malformed request body.")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    logger.exception("Unhandled exception (request_id=%s)", _request_id(request))
    return _error(500, "Internal server error")


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, tags=["calculator"])
app.include_router(feedback.router, tags=["feedback"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Apartment Cost Analyzer API"}


def run() -> None:
    """Serve the app with uvicorn on ``settings.HOST:settings.PORT``."""
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s on port %d", settings.APP_NAME, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
