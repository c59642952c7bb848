"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutritrack.api.appointments import router as appointments_router
from nutritrack.api.auth import router as auth_router
from nutritrack.api.diet import router as diet_router
from nutritrack.api.exercises import router as exercises_router
from nutritrack.api.meals import router as meals_router
from nutritrack.api.patient import router as patient_router
from nutritrack.api.reports import router as reports_router
from nutritrack.app_logging import configure_logging
from nutritrack.config import parse_cors_origins
from nutritrack.containers import AppContainer
from nutritrack.domain.errors import NutriTrackError


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriTrack")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(meals_router)
    app.include_router(exercises_router)
    app.include_router(reports_router)
    app.include_router(diet_router)
    app.include_router(appointments_router)
    app.include_router(patient_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(NutriTrackError)
    async def handle_domain_error(
        request: Request, exc: NutriTrackError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": exc.message},
            )
        return _failure(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else None
        return _failure(status.HTTP_400_BAD_REQUEST, str(message or "Invalid request"))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _failure(exc.status_code, f"Route {request.url.path} not found")
        return _failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    return app
