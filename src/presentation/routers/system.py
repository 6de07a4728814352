"""System router for non-versioned application endpoints.

Provides root, application health and secrets backend health endpoints.
These endpoints never return secret values.
"""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_secrets_provider, get_secrets_state
from src.core.secrets_state import SecretsState
from src.domain.protocols import SecretsProviderProtocol
from src.schemas.system_schemas import (
    HealthResponse,
    ProviderHealthResponse,
    RootResponse,
)

_STARTED_AT = time.monotonic()

system_router = APIRouter(tags=["System"])


@system_router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """Root endpoint - service banner and pointers.

    Returns:
        RootResponse: Banner, docs and health paths, configured backend.
    """
    return RootResponse(
        message=settings.app_name,
        provider=settings.secret_provider,
    )


@system_router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health(
    state: SecretsState = Depends(get_secrets_state),
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers.

    Healthy iff secrets have been loaded and published.

    Returns:
        HealthResponse: Status, uptime and secrets state.
    """
    loaded = state.is_published
    return HealthResponse(
        status="healthy" if loaded else "unhealthy",
        timestamp=datetime.now(UTC),
        uptime=time.monotonic() - _STARTED_AT,
        provider=state.provider or settings.secret_provider,
        secrets_loaded=loaded,
        version=settings.app_version,
    )


@system_router.get(
    "/health/provider",
    response_model=ProviderHealthResponse,
    responses={503: {"model": ProviderHealthResponse}},
    tags=["Health"],
)
def provider_health(
    provider: SecretsProviderProtocol = Depends(get_secrets_provider),
) -> JSONResponse:
    """Probe the configured secrets backend.

    Sync handler: the health check performs blocking network I/O and runs
    in the threadpool.

    Returns:
        JSONResponse: 200 when healthy, 503 otherwise.
    """
    healthy = provider.health_check()
    body = ProviderHealthResponse(
        provider=provider.name.value,
        healthy=healthy,
        checked_at=datetime.now(UTC),
    )
    return JSONResponse(
        status_code=200 if healthy else 503,
        content=body.model_dump(mode="json"),
    )
