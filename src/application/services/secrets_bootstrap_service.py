"""Secrets bootstrap service (startup gate).

Runs once, before the HTTP server accepts traffic: resolve the configured
secrets backend, load the raw bundle, validate it, publish the result. Any
failure propagates and aborts startup. Nothing is published on failure.

Architecture:
    - Application service (orchestrates domain validator + backend port)
    - Provider is obtained through an injected factory callable
    - Wired by src.core.container.bootstrap_secrets()

Usage:
    service = SecretsBootstrapService(
        provider_factory=get_secrets_provider,
        state=get_secrets_state(),
        logger=get_logger(),
    )
    secrets = service.bootstrap()
"""

import os
from collections.abc import Callable, MutableMapping

from src.core.secrets_state import SecretsState
from src.domain.errors import SecretsError
from src.domain.protocols import LoggerProtocol, SecretsProviderProtocol
from src.domain.validators.secrets_validator import validate_secrets
from src.domain.value_objects import ValidatedSecrets


def mirror_secrets_to_environment(
    secrets: ValidatedSecrets, environ: MutableMapping[str, str]
) -> list[str]:
    """Copy validated values into a process-environment mapping.

    Compatibility shim for libraries that only read configuration from
    environment variables. New code should read SecretsState instead.

    Args:
        secrets: Validated secrets.
        environ: Target mapping (os.environ in production).

    Returns:
        Names of the keys written.
    """
    values = secrets.to_environment()
    environ.update(values)
    return sorted(values)


class SecretsBootstrapService:
    """Fail-fast secrets loading for application startup.

    Dependencies (injected via constructor):
        - provider_factory: Returns the configured secrets backend
        - state: Write-once SecretsState to publish into
        - logger: Structured logger (key names only, never values)
        - environ: Mapping to mirror secrets into (defaults to os.environ)
    """

    def __init__(
        self,
        *,
        provider_factory: Callable[[], SecretsProviderProtocol],
        state: SecretsState,
        logger: LoggerProtocol,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self._provider_factory = provider_factory
        self._state = state
        self._logger = logger
        self._environ = os.environ if environ is None else environ

    def bootstrap(self) -> ValidatedSecrets:
        """Load, validate and publish the application secrets.

        Returns:
            The published ValidatedSecrets.

        Raises:
            ProviderInitError: Backend could not be selected or constructed.
            SecretLoadError: Backend failed or returned malformed data.
            SecretValidationError: Bundle violates the secrets schema.
        """
        provider_label: str | None = None
        try:
            provider = self._provider_factory()
            provider_label = provider.name.value
            self._logger.info("Loading secrets", provider=provider_label)

            raw = provider.load_secrets()
            secrets = validate_secrets(raw, provider=provider_label)
        except SecretsError as e:
            self._logger.error(
                "Failed to load secrets",
                error=e,
                provider=provider_label or e.provider,
                code=e.code.value,
            )
            raise

        self._state.publish(secrets, provider=provider_label)
        mirrored = mirror_secrets_to_environment(secrets, self._environ)

        self._logger.info(
            "Secrets loaded and validated",
            provider=provider_label,
            count=len(mirrored),
            keys=mirrored,
        )
        return secrets
