import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from impact.application.api.v1.errors import map_impact_error
from impact.application.api.v1.routes import health, reports
from impact.application.di import create_container
from impact.config import Config, configure_logging
from impact.domain.shared.error import ImpactError
from impact.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    yield
    # Closes the HTTP clients of the remote report sources
    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)
    if not config.hypercerts.owner_address:
        logger.warning("IMPACT_HYPERCERTS__OWNER_ADDRESS is not set; report requests will fail")
    if not config.indexer.url:
        logger.warning("IMPACT_INDEXER__URL is not set; report requests will fail")

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    container = create_container(config)
    setup_dishka(container, app_instance)

    register_routes(app_instance)
    return app_instance


def register_routes(app_instance: FastAPI) -> None:
    """Mount the v1 routers and the error handlers."""
    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(reports.router, prefix="/api/v1")

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(ImpactError)
    async def impact_error_handler(request: Request, exc: ImpactError):
        http_exc = map_impact_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )
