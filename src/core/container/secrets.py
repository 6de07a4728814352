"""Secrets provider factory (Registry-driven).

Selects and constructs the secrets backend adapter named by SECRET_PROVIDER,
and wires the startup gate that loads, validates and publishes secrets.

Registry-Driven Pattern:
    - Backend metadata stored in domain/providers/registry.py
    - Valid SECRET_PROVIDER tokens come from the registry
    - Self-enforcing: Tests fail if registry/factory mismatch

Usage:
    - create_secrets_provider(): Pure selection, no caching
    - get_secrets_provider(): App-scoped singleton
    - bootstrap_secrets(): Startup gate (called from the FastAPI lifespan)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_logger, get_secrets_state
from src.core.enums import ErrorCode, SecretProviderType
from src.domain.errors import ProviderInitError
from src.domain.providers.registry import (
    get_all_provider_slugs,
    get_provider_metadata,
)

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.secrets_protocol import SecretsProviderProtocol
    from src.domain.value_objects import ValidatedSecrets
    from src.infrastructure.secrets.provider_config import (
        LocalStackProviderConfig,
        VaultProviderConfig,
    )


def get_current_provider_type() -> str:
    """Return the configured SECRET_PROVIDER token (lower case)."""
    return get_settings().secret_provider


def get_available_provider_types() -> list[SecretProviderType]:
    """Return every supported backend token, in registry order."""
    return get_all_provider_slugs()


def create_secrets_provider(
    provider_type: str | None = None,
    config: "VaultProviderConfig | LocalStackProviderConfig | None" = None,
    *,
    logger: "LoggerProtocol | None" = None,
) -> "SecretsProviderProtocol":
    """Construct the secrets adapter for a provider token.

    Args:
        provider_type: Backend token; defaults to SECRET_PROVIDER.
        config: Backend settings; built from Settings when omitted.
        logger: Logger for the adapter; defaults to get_logger().

    Returns:
        Adapter implementing SecretsProviderProtocol.

    Raises:
        ProviderInitError: PROVIDER_UNKNOWN for an unrecognized token,
            PROVIDER_INIT_FAILED for missing settings or client errors.

    Example:
        >>> provider = create_secrets_provider("vault")
        >>> provider.name
        <SecretProviderType.VAULT: 'vault'>
    """
    settings = get_settings()
    token = (provider_type or settings.secret_provider).strip().lower()

    # Step 1: Lookup metadata from registry
    metadata = get_provider_metadata(token)
    if metadata is None:
        valid = ", ".join(f"'{slug.value}'" for slug in get_all_provider_slugs())
        raise ProviderInitError(
            f"Unknown provider type: {token}. Valid options: {valid}",
            provider=token,
            code=ErrorCode.PROVIDER_UNKNOWN,
        )

    # Step 2: Validate required settings (registry-driven)
    if config is None:
        missing = [
            name for name in metadata.required_settings if not getattr(settings, name)
        ]
        if missing:
            raise ProviderInitError(
                f"Provider '{token}' not configured. "
                f"Missing settings: {', '.join(missing)}",
                provider=token,
            )

    logger = logger or get_logger()

    # Step 3: Lazy import and instantiate (avoid circular imports)
    match metadata.slug:
        case SecretProviderType.VAULT:
            from src.infrastructure.secrets import VaultAdapter, VaultProviderConfig

            _check_config_type(config, VaultProviderConfig, token)
            return VaultAdapter(
                config or VaultProviderConfig.from_settings(settings), logger=logger
            )

        case SecretProviderType.LOCALSTACK:
            from src.infrastructure.secrets import (
                LocalStackAdapter,
                LocalStackProviderConfig,
            )

            _check_config_type(config, LocalStackProviderConfig, token)
            return LocalStackAdapter(
                config or LocalStackProviderConfig.from_settings(settings),
                logger=logger,
            )

        case _:
            raise ProviderInitError(
                f"Provider '{token}' in registry but no factory defined",
                provider=token,
            )


def _check_config_type(config: object, expected: type, token: str) -> None:
    """Reject an explicit config built for a different backend."""
    if config is not None and not isinstance(config, expected):
        raise ProviderInitError(
            f"Provider '{token}' requires {expected.__name__}, "
            f"got {type(config).__name__}",
            provider=token,
        )


@lru_cache()
def get_secrets_provider() -> "SecretsProviderProtocol":
    """Get the configured secrets provider singleton (app-scoped).

    Used by the bootstrap gate and the provider health endpoint.

    Raises:
        ProviderInitError: See create_secrets_provider().
    """
    return create_secrets_provider()


def bootstrap_secrets() -> "ValidatedSecrets":
    """Load, validate and publish secrets for this process.

    Called once from the FastAPI lifespan, before traffic is accepted.

    Raises:
        ProviderInitError, SecretLoadError, SecretValidationError: Startup
            must abort.
    """
    from src.application.services.secrets_bootstrap_service import (
        SecretsBootstrapService,
    )

    service = SecretsBootstrapService(
        provider_factory=get_secrets_provider,
        state=get_secrets_state(),
        logger=get_logger(),
    )
    return service.bootstrap()
