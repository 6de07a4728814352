"""Secrets provider domain module.

Exports the secrets backend registry and related types.
"""

from src.domain.providers.registry import (
    SECRETS_PROVIDER_REGISTRY,
    CostModel,
    SecretsProviderMetadata,
    SetupComplexity,
    get_all_provider_slugs,
    get_provider_metadata,
)

__all__ = [
    # Registry
    "SECRETS_PROVIDER_REGISTRY",
    # Types
    "SecretsProviderMetadata",
    "SetupComplexity",
    "CostModel",
    # Helper Functions
    "get_provider_metadata",
    "get_all_provider_slugs",
]
