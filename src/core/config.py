"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every value has a default suitable for local development against
the docker-compose Vault and LocalStack containers.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Secrets themselves are NOT settings: they are loaded from the configured
  backend at startup (see src/application/services/secrets_bootstrap_service.py)

Usage:
    from src.core.config import settings

    provider = settings.secret_provider
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment, SecretProviderType
from src.domain.validators import validate_http_url, validate_port


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (local development)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=3000,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Secrets Management Demo API",
        description="Application name",
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version",
    )

    # Secret provider selection
    secret_provider: str = Field(
        default=SecretProviderType.VAULT.value,
        description="Secrets backend token ('vault' or 'localstack')",
    )

    # Vault configuration (used when SECRET_PROVIDER=vault)
    vault_addr: str = Field(
        default="http://localhost:8200",
        description="Vault server URL",
    )
    vault_token: str = Field(
        default="root",
        description="Vault access token (dev server root token by default)",
    )
    vault_secret_path: str = Field(
        default="secret/data/widget-server",
        description="KV v2 read path, including the 'data/' segment",
    )

    # AWS / LocalStack configuration (used when SECRET_PROVIDER=localstack)
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for Secrets Manager",
    )
    aws_access_key_id: str = Field(
        default="test",
        description="AWS access key id (LocalStack accepts any value)",
    )
    aws_secret_access_key: str = Field(
        default="test",
        description="AWS secret access key (LocalStack accepts any value)",
    )
    aws_secret_name: str = Field(
        default="/widget-server/secrets",
        description="Secrets Manager secret id holding the JSON bundle",
    )
    use_localstack: bool = Field(
        default=False,
        description="Route Secrets Manager calls to LOCALSTACK_ENDPOINT instead of AWS",
    )
    localstack_endpoint: str = Field(
        default="http://localhost:4566",
        description="LocalStack edge endpoint",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def validate_server_port(cls, v: int) -> int:
        """
        Validate the bind port range.

        Args:
            v: Port number.

        Returns:
            int: Validated port.

        Raises:
            ValueError: If port is not between 1 and 65535.
        """
        return validate_port(v)

    @field_validator("vault_addr", "localstack_endpoint")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Validate http(s) URLs and remove trailing slashes.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return validate_http_url(v).rstrip("/")

    @field_validator("secret_provider")
    @classmethod
    def normalize_secret_provider(cls, v: str) -> str:
        """
        Normalize the provider token.

        Unknown tokens are accepted here and rejected by the provider
        factory, which reports the valid options.

        Args:
            v: Raw SECRET_PROVIDER value.

        Returns:
            str: Lower-cased, stripped token.
        """
        return v.strip().lower()

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
