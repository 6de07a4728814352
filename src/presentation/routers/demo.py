"""Demo router showcasing the loaded secrets.

Every response masks values: key names, counts, the last four characters
of one example value and a connection string with the password replaced.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.core.config import settings
from src.core.container import get_available_provider_types, get_secrets_state
from src.core.secrets_state import SecretsState
from src.domain.providers.registry import SECRETS_PROVIDER_REGISTRY
from src.domain.value_objects import ValidatedSecrets
from src.schemas.demo_schemas import (
    DatabaseStatusResponse,
    ProviderComparisonItem,
    ProviderComparisonResponse,
    SecretExample,
    SecretsInfoResponse,
)

demo_router = APIRouter(prefix="/demo", tags=["Demo"])


def mask_value(value: str) -> str:
    """Mask a secret, keeping at most the last 4 characters.

    Values of 4 characters or fewer are fully masked.
    """
    if len(value) <= 4:
        return "***"
    return "***" + value[-4:]


def require_secrets(
    state: SecretsState = Depends(get_secrets_state),
) -> ValidatedSecrets:
    """Dependency returning published secrets, 503 if not loaded."""
    if not state.is_published:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Secrets not loaded",
        )
    return state.get()


@demo_router.get("/secrets-info", response_model=SecretsInfoResponse)
async def secrets_info(
    state: SecretsState = Depends(get_secrets_state),
    secrets: ValidatedSecrets = Depends(require_secrets),
) -> SecretsInfoResponse:
    """Information about loaded secrets (values masked).

    Returns:
        SecretsInfoResponse: Backend, key names, load time, one masked value.
    """
    values = secrets.to_environment()
    keys = list(values)
    example = (
        SecretExample(key=keys[0], value_masked=mask_value(values[keys[0]]))
        if keys
        else None
    )
    return SecretsInfoResponse(
        provider=state.provider,
        total_secrets=len(keys),
        secret_keys=keys,
        loaded_at=state.loaded_at,
        example=example,
    )


@demo_router.get("/database-status", response_model=DatabaseStatusResponse)
async def database_status(
    secrets: ValidatedSecrets = Depends(require_secrets),
) -> DatabaseStatusResponse:
    """Database configuration derived from the loaded secrets.

    Returns:
        DatabaseStatusResponse: Host, port, user, database, masked DSN.
    """
    has_password = bool(secrets.database_password)
    return DatabaseStatusResponse(
        configured=has_password,
        host=secrets.database_host,
        port=secrets.database_port,
        database=secrets.database_name,
        user=secrets.database_user,
        password_loaded=has_password,
        connection_string=secrets.masked_connection_string(),
    )


@demo_router.get(
    "/provider-comparison",
    response_model=ProviderComparisonResponse,
    tags=["Providers"],
)
async def provider_comparison() -> ProviderComparisonResponse:
    """Comparison between the supported secrets backends.

    Returns:
        ProviderComparisonResponse: Registry-derived comparison entries.
    """
    return ProviderComparisonResponse(
        current_provider=settings.secret_provider,
        available_providers=[p.value for p in get_available_provider_types()],
        comparison=[
            ProviderComparisonItem.from_metadata(metadata)
            for metadata in SECRETS_PROVIDER_REGISTRY
        ],
    )
