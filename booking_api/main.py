from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from booking_api.api.v1.api import api_router
from booking_api.core.config import Settings, settings
from booking_api.core.exceptions import BookingAPIError
from booking_api.core.logging_config import configure_logging
from booking_api.core.state import AppState

logger = structlog.get_logger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with fresh in-memory state."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Server starting",
            project=app_settings.PROJECT_NAME,
            version=app_settings.VERSION,
            environment=app_settings.ENVIRONMENT,
            port=app_settings.PORT,
        )
        if app_settings.uses_default_passcode:
            logger.warning(
                "ADMIN_PASSCODE is not set; using the default passcode. "
                "Set the ADMIN_PASSCODE environment variable for production."
            )
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.booking = AppState.from_settings(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BookingAPIError)
    async def booking_api_error_handler(request: Request, exc: BookingAPIError):
        return JSONResponse(
            status_code=exc.status_code, content={"message": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        message = _describe_validation_error(exc)
        logger.warning("Request validation failed", path=request.url.path, error=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": message}
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error."},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": app_settings.VERSION}

    app.include_router(api_router, prefix="/api")
    return app


configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "booking_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
