"""Demo endpoint response schemas.

Responses expose secret key NAMES and masked values only.

Reference:
    - src/presentation/routers/demo.py
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.providers.registry import SecretsProviderMetadata


# =============================================================================
# Secrets Info
# =============================================================================


class SecretExample(BaseModel):
    """One masked secret value.

    Attributes:
        key: Secret key name.
        value_masked: "***" followed by the last 4 characters.
    """

    key: str = Field(..., description="Secret key name", examples=["DATABASE_HOST"])
    value_masked: str = Field(
        ..., description="Last 4 characters of the value", examples=["***host"]
    )


class SecretsInfoResponse(BaseModel):
    """Loaded secrets overview (values masked).

    Attributes:
        provider: Backend the secrets were loaded from.
        total_secrets: Number of loaded keys.
        secret_keys: Loaded key names.
        loaded_at: When the secrets were published.
        example: One masked value, if any secret is loaded.
    """

    provider: str = Field(..., description="Secrets backend", examples=["vault"])
    total_secrets: int = Field(..., ge=0, description="Number of loaded secrets")
    secret_keys: list[str] = Field(..., description="Loaded secret key names")
    loaded_at: datetime = Field(..., description="Publication time (UTC)")
    example: SecretExample | None = Field(None, description="Masked example value")


# =============================================================================
# Database Status
# =============================================================================


class DatabaseStatusResponse(BaseModel):
    """Database settings derived from loaded secrets.

    Attributes:
        configured: Whether a password is available.
        host: Database host.
        port: Database port.
        database: Database name.
        user: Database user.
        password_loaded: Whether a password is available.
        connection_string: Connection string with the password masked.
    """

    configured: bool = Field(..., description="Whether the database is configured")
    host: str = Field(..., description="Database host")
    port: int = Field(..., description="Database port")
    database: str = Field(..., description="Database name")
    user: str = Field(..., description="Database user")
    password_loaded: bool = Field(..., description="Whether a password is loaded")
    connection_string: str = Field(..., description="Masked connection string")


# =============================================================================
# Provider Comparison
# =============================================================================


class ProviderFeatures(BaseModel):
    """Backend feature flags."""

    rotation: bool
    versioning: bool
    audit_logs: bool
    multi_region: bool


class ProviderComparisonItem(BaseModel):
    """Comparison entry for one backend.

    Attributes:
        provider: Backend token.
        display_name: Human-facing name.
        pros: Advantages.
        cons: Drawbacks.
        setup_complexity: low, medium or high.
        cost: free, paid or freemium.
        features: Feature flags.
    """

    provider: str = Field(..., description="Secrets backend", examples=["vault"])
    display_name: str = Field(..., description="Backend name")
    pros: list[str] = Field(..., description="Advantages")
    cons: list[str] = Field(..., description="Drawbacks")
    setup_complexity: str = Field(..., description="low, medium or high")
    cost: str = Field(..., description="free, paid or freemium")
    features: ProviderFeatures

    @classmethod
    def from_metadata(
        cls, metadata: SecretsProviderMetadata
    ) -> "ProviderComparisonItem":
        """Convert registry metadata to a comparison entry.

        Args:
            metadata: Registry entry.

        Returns:
            ProviderComparisonItem for API response.
        """
        return cls(
            provider=metadata.slug.value,
            display_name=metadata.display_name,
            pros=list(metadata.pros),
            cons=list(metadata.cons),
            setup_complexity=metadata.setup_complexity.value,
            cost=metadata.cost.value,
            features=ProviderFeatures(
                rotation=metadata.supports_rotation,
                versioning=metadata.supports_versioning,
                audit_logs=metadata.supports_audit_logs,
                multi_region=metadata.supports_multi_region,
            ),
        )


class ProviderComparisonResponse(BaseModel):
    """Side-by-side comparison of the supported backends.

    Attributes:
        current_provider: Configured backend token.
        available_providers: Every supported token.
        comparison: One entry per backend.
    """

    current_provider: str = Field(..., description="Configured secrets backend")
    available_providers: list[str] = Field(..., description="Supported backends")
    comparison: list[ProviderComparisonItem] = Field(
        ..., description="Per-backend comparison"
    )
