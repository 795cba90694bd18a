"""Main FastAPI application for the multi-calendar service.

This module creates and configures the FastAPI application with its
routers, middleware and error handlers.
"""

import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Dict

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from multicalendar.api import convert_endpoints, health
from multicalendar.api.exceptions import BaseAPIException, api_exception_handler
from multicalendar.config import get_settings
from multicalendar.utils.logging import get_logger, request_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        "application_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )
    yield
    logger.info("application_stopping")


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log every request with its status code and duration."""
    request_data = request_logger.log_request(request)
    started = time.perf_counter()
    response = await call_next(request)
    request_logger.log_response(
        request_data, response.status_code, time.perf_counter() - started
    )
    return response


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    setup_logging()
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Convert dates between Gregorian and eleven other calendar systems",
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=3600,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(BaseAPIException, api_exception_handler)  # type: ignore[arg-type]

    # Health check endpoints
    app.include_router(health.router, prefix="")

    # Conversion endpoints
    app.include_router(convert_endpoints.router, prefix=settings.api_v1_prefix)

    @app.get("/api")
    async def api_info() -> Dict[str, Any]:
        """API information endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "convert": f"{settings.api_v1_prefix}/convert",
                "calendars": f"{settings.api_v1_prefix}/calendars",
                "boundaries": f"{settings.api_v1_prefix}/boundaries",
                "holidays": f"{settings.api_v1_prefix}/holidays",
                "month_grid": f"{settings.api_v1_prefix}/month-grid",
                "health": "/health/live",
            },
        }

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle 500 errors."""
        logger.error("internal_server_error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "multicalendar.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
