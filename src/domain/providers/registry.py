"""Secrets Provider Registry - Single source of truth for backend metadata.

Catalogs every supported secrets backend with its comparison metadata and
the settings its adapter needs. The container factory derives its list of
valid SECRET_PROVIDER tokens from this registry, and the provider comparison
endpoint renders it directly.

Registry Structure:
    - SecretsProviderMetadata: Dataclass with backend metadata
    - SECRETS_PROVIDER_REGISTRY: List of all backend entries
    - Helper Functions: Lookup utilities

Usage:
    from src.domain.providers.registry import get_provider_metadata

    metadata = get_provider_metadata("vault")
    if metadata and metadata.supports_rotation:
        ...
"""

from dataclasses import dataclass, field
from enum import Enum

from src.core.enums import SecretProviderType


class SetupComplexity(str, Enum):
    """Effort needed to run the backend locally."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CostModel(str, Enum):
    """Pricing model of the backend."""

    FREE = "free"
    PAID = "paid"
    FREEMIUM = "freemium"


@dataclass(frozen=True, kw_only=True)
class SecretsProviderMetadata:
    """Metadata for a single secrets backend.

    Attributes:
        slug: SECRET_PROVIDER token selecting this backend.
        display_name: Human-facing name.
        description: One-line summary.
        setup_complexity: Effort to run it locally.
        cost: Pricing model.
        pros: Advantages, in display order.
        cons: Drawbacks, in display order.
        supports_rotation: Built-in secret rotation.
        supports_versioning: Secret version history.
        supports_audit_logs: Access audit trail.
        supports_multi_region: Cross-region replication.
        required_settings: Settings attribute names the adapter consumes.
    """

    slug: SecretProviderType
    display_name: str
    description: str
    setup_complexity: SetupComplexity
    cost: CostModel
    pros: tuple[str, ...] = field(default_factory=tuple)
    cons: tuple[str, ...] = field(default_factory=tuple)
    supports_rotation: bool = False
    supports_versioning: bool = False
    supports_audit_logs: bool = False
    supports_multi_region: bool = False
    required_settings: tuple[str, ...] = field(default_factory=tuple)


# =============================================================================
# Secrets Provider Registry (Single Source of Truth)
# =============================================================================

SECRETS_PROVIDER_REGISTRY: list[SecretsProviderMetadata] = [
    SecretsProviderMetadata(
        slug=SecretProviderType.VAULT,
        display_name="HashiCorp Vault",
        description="Self-hosted, token-authenticated KV v2 secret store",
        setup_complexity=SetupComplexity.MEDIUM,
        cost=CostModel.FREE,
        pros=(
            "Open-source and free",
            "Multi-cloud support",
            "Dynamic secrets",
            "Granular ACL policies",
            "Active open-source community",
        ),
        cons=(
            "Requires self-hosted infrastructure",
            "Steep learning curve",
            "Complex HA setup",
            "Manual rotation setup required",
        ),
        supports_rotation=True,
        supports_versioning=True,
        supports_audit_logs=True,
        supports_multi_region=False,
        required_settings=("vault_addr", "vault_token", "vault_secret_path"),
    ),
    SecretsProviderMetadata(
        slug=SecretProviderType.LOCALSTACK,
        display_name="AWS Secrets Manager (LocalStack)",
        description="Managed secret storage API, emulated locally by LocalStack",
        setup_complexity=SetupComplexity.LOW,
        cost=CostModel.FREE,
        pros=(
            "100% free for development",
            "AWS API compatibility",
            "No cloud account needed",
            "Fast local development",
            "Offline capability",
        ),
        cons=(
            "Development only (not for production)",
            "Some AWS features not fully supported",
            "Requires Docker",
            "Mock data only",
        ),
        supports_rotation=False,
        supports_versioning=True,
        supports_audit_logs=False,
        supports_multi_region=False,
        required_settings=(
            "aws_region",
            "aws_access_key_id",
            "aws_secret_access_key",
            "aws_secret_name",
        ),
    ),
]
"""Registry of every supported secrets backend.

When adding a backend:
1. Add a SecretProviderType member
2. Add a SecretsProviderMetadata entry here
3. Implement the adapter in src/infrastructure/secrets/
4. Add the factory case in src/core/container/secrets.py
Registry compliance tests fail until all four are in place.
"""


# =============================================================================
# Helper Functions
# =============================================================================


def get_provider_metadata(slug: str) -> SecretsProviderMetadata | None:
    """Get backend metadata by slug.

    Args:
        slug: SECRET_PROVIDER token (e.g. "vault").

    Returns:
        SecretsProviderMetadata if found, None otherwise.
    """
    return next((p for p in SECRETS_PROVIDER_REGISTRY if p.slug == slug), None)


def get_all_provider_slugs() -> list[SecretProviderType]:
    """Get all registered backend slugs, in registry order.

    Example:
        >>> [s.value for s in get_all_provider_slugs()]
        ['vault', 'localstack']
    """
    return [p.slug for p in SECRETS_PROVIDER_REGISTRY]
