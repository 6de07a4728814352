"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance. Secrets are loaded
from the configured backend in the lifespan, before the server accepts any
request. A provider, load or validation failure propagates out of the
lifespan and the ASGI server aborts startup.

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 3000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import bootstrap_secrets, get_logger
from src.presentation.routers import demo_router, system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Load, validate and publish secrets (fail-fast)
    - Shutdown: Log only; published secrets live for the process lifetime

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "Starting application",
        environment=settings.environment.value,
        provider=settings.secret_provider,
    )

    bootstrap_secrets()

    yield

    logger.info("Shutting down application")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Pluggable secrets management (HashiCorp Vault / AWS Secrets Manager)",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(system_router)
app.include_router(demo_router)


def run() -> None:
    """Run the API with uvicorn using HOST/PORT settings."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
