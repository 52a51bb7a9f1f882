"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitrine import __version__
from vitrine.config.settings import Settings, get_settings, override_settings
from vitrine.di import (
    DIContainer,
    get_container,
    initialize_container,
    set_container,
    shutdown_container,
)
from vitrine.domain.exceptions import VitrineException
from vitrine.infrastructure.monitoring import get_logger, setup_logging
from vitrine.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    http_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
    vitrine_exception_handler,
)
from vitrine.presentation.api.routes import subscriptions, users

API_PREFIX = "/api/v1"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    else:
        override_settings(settings)
    set_container(DIContainer(settings))

    # Setup structured logging (JSON only in production)
    json_logs = settings.is_production
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Vitrine application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Vitrine application...")
        await initialize_container()
        logger.info("Vitrine application started successfully")

        yield

        logger.info("Shutting down Vitrine application...")
        await shutdown_container()
        logger.info("Vitrine application shutdown complete")

    app = FastAPI(
        title="Vitrine API",
        description="User accounts, sessions and channel views for video sharing",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware chain: the last one added runs first
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(VitrineException, vitrine_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(users.router, prefix=API_PREFIX)
    app.include_router(subscriptions.router, prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Report store connectivity."""
        db_healthy = await get_container().database.health_check()
        return {
            "status": "healthy" if db_healthy else "degraded",
            "version": __version__,
            "components": {
                "database": {"status": "healthy" if db_healthy else "unhealthy"},
            },
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    logger.info("Vitrine application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Create application instance.

    For uvicorn: uvicorn vitrine.main:get_app --factory
    """
    return create_app()


def run():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vitrine.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    run()
