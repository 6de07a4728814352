"""Per-backend connection settings for the secrets adapters.

Exactly one of these is built per process, chosen by SECRET_PROVIDER.
Values come from Settings (environment variables); the dataclasses exist so
adapters can be constructed and tested without touching global settings.
"""

from dataclasses import dataclass

from src.core.config import Settings


@dataclass(frozen=True, slots=True, kw_only=True)
class VaultProviderConfig:
    """Connection settings for HashiCorp Vault.

    Attributes:
        endpoint: Vault server URL (e.g. "http://localhost:8200").
        token: Vault access token.
        secret_path: KV v2 read path including the "data/" segment
            (e.g. "secret/data/widget-server").
        api_version: Vault HTTP API version prefix.
    """

    endpoint: str
    token: str
    secret_path: str
    api_version: str = "v1"

    @classmethod
    def from_settings(cls, settings: Settings) -> "VaultProviderConfig":
        """Build from application settings."""
        return cls(
            endpoint=settings.vault_addr,
            token=settings.vault_token,
            secret_path=settings.vault_secret_path,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class LocalStackProviderConfig:
    """Connection settings for AWS Secrets Manager (LocalStack or AWS).

    Attributes:
        region: AWS region.
        access_key_id: AWS access key id.
        secret_access_key: AWS secret access key.
        secret_name: Secret id holding the JSON bundle.
        endpoint: Custom endpoint URL; only used when use_localstack is set.
        use_localstack: Route calls to endpoint instead of real AWS.
    """

    region: str
    access_key_id: str
    secret_access_key: str
    secret_name: str
    endpoint: str | None = None
    use_localstack: bool = False

    @property
    def endpoint_url(self) -> str | None:
        """Endpoint passed to boto3, or None for the default AWS endpoint."""
        if self.use_localstack and self.endpoint:
            return self.endpoint
        return None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalStackProviderConfig":
        """Build from application settings."""
        return cls(
            region=settings.aws_region,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
            secret_name=settings.aws_secret_name,
            endpoint=settings.localstack_endpoint,
            use_localstack=settings.use_localstack,
        )
