"""HashiCorp Vault adapter for application secrets.

Implements SecretsProviderProtocol against a Vault KV v2 engine using hvac
with token authentication.

File: vault_adapter.py -> class VaultAdapter (PEP 8 naming)
"""

from collections.abc import Mapping

import hvac

from src.core.enums import ErrorCode, SecretProviderType
from src.domain.errors import ProviderInitError, SecretLoadError
from src.domain.protocols import LoggerProtocol, SecretBundle
from src.infrastructure.secrets.provider_config import VaultProviderConfig


class VaultAdapter:
    """Secrets from a single Vault KV v2 path.

    The configured path is read raw, so it must include the engine's
    "data/" segment (e.g. "secret/data/widget-server"). KV v2 wraps the
    stored pairs twice: {"data": {"data": {...}, "metadata": {...}}}.

    Example:
        >>> adapter = VaultAdapter(
        ...     VaultProviderConfig(
        ...         endpoint="http://localhost:8200",
        ...         token="root",
        ...         secret_path="secret/data/widget-server",
        ...     ),
        ...     logger=get_logger(),
        ... )
        >>> adapter.load_secrets()["DATABASE_HOST"]
        'localhost'
    """

    name = SecretProviderType.VAULT

    def __init__(self, config: VaultProviderConfig, *, logger: LoggerProtocol) -> None:
        """Initialize the hvac client.

        No network call is made here; connectivity problems surface in
        load_secrets() or health_check().

        Args:
            config: Vault connection settings.
            logger: Structured logger.

        Raises:
            ProviderInitError: If endpoint or path is empty, or the client
                cannot be constructed.
        """
        self._logger = logger.bind(provider=self.name.value)
        self._config = config

        if not config.endpoint or not config.secret_path:
            raise ProviderInitError(
                "Vault endpoint and secret path are required",
                provider=self.name.value,
            )

        try:
            self._client = hvac.Client(url=config.endpoint, token=config.token)
        except Exception as e:
            raise ProviderInitError(
                "Failed to initialize Vault client",
                provider=self.name.value,
                cause=e,
            ) from e

        self._logger.info(
            "Vault provider initialized",
            endpoint=config.endpoint,
            secret_path=config.secret_path,
        )

    def load_secrets(self) -> SecretBundle:
        """Read the configured KV v2 path.

        Returns:
            The inner "data.data" mapping, unmodified.

        Raises:
            SecretLoadError: SECRET_LOAD_FAILED on transport/auth errors,
                SECRET_NOT_FOUND when nothing is stored at the path,
                SECRET_INVALID_RESPONSE when the KV v2 envelope is missing.
        """
        path = self._config.secret_path
        self._logger.debug("Loading secrets from Vault", path=path)

        try:
            response = self._client.read(path)
        except Exception as e:
            self._logger.error(
                "Failed to load secrets from Vault", error=e, path=path
            )
            raise SecretLoadError(
                f"Failed to read secrets from path '{path}': {e}",
                provider=self.name.value,
                code=ErrorCode.SECRET_LOAD_FAILED,
                cause=e,
            ) from e

        if response is None:
            self._logger.error("No secret stored at Vault path", path=path)
            raise SecretLoadError(
                f"Failed to read secrets from path '{path}': secret not found",
                provider=self.name.value,
                code=ErrorCode.SECRET_NOT_FOUND,
            )

        data = response.get("data") if isinstance(response, Mapping) else None
        secrets = data.get("data") if isinstance(data, Mapping) else None
        if not isinstance(secrets, Mapping):
            self._logger.error("Invalid response format from Vault", path=path)
            raise SecretLoadError(
                f"Failed to read secrets from path '{path}': "
                "invalid response format (expected data.data mapping)",
                provider=self.name.value,
                code=ErrorCode.SECRET_INVALID_RESPONSE,
            )

        self._logger.info(
            "Secrets loaded successfully from Vault",
            count=len(secrets),
            keys=sorted(secrets),
        )
        return secrets

    def health_check(self) -> bool:
        """Probe the unauthenticated seal-status endpoint.

        Returns:
            True if Vault is initialized and unsealed, False otherwise.
        """
        try:
            status = self._client.sys.read_seal_status()
        except Exception as e:
            self._logger.warning("Vault health check failed", error=str(e))
            return False

        # Non-JSON bodies come back as a raw Response object.
        if not isinstance(status, Mapping):
            self._logger.warning(
                "Vault health check failed",
                error="unexpected seal-status response",
                response_type=type(status).__name__,
            )
            return False

        healthy = status.get("initialized") is True and status.get("sealed") is False
        self._logger.debug(
            "Vault health check",
            initialized=status.get("initialized"),
            sealed=status.get("sealed"),
            healthy=healthy,
        )
        return healthy
