"""Secrets infrastructure package.

This package provides secrets backend adapters implementing
SecretsProviderProtocol. Adapters are selected and constructed by
src.core.container (SECRET_PROVIDER).

Architecture:
- VaultAdapter: HashiCorp Vault KV v2 (hvac, token auth)
- LocalStackAdapter: AWS Secrets Manager via boto3 (LocalStack or AWS)
- VaultProviderConfig / LocalStackProviderConfig: per-backend settings

Security:
- Read-only protocol (apps cannot modify secrets)
- Adapters log key names and counts, never values
"""

from src.infrastructure.secrets.localstack_adapter import LocalStackAdapter
from src.infrastructure.secrets.provider_config import (
    LocalStackProviderConfig,
    VaultProviderConfig,
)
from src.infrastructure.secrets.vault_adapter import VaultAdapter

__all__ = [
    "LocalStackAdapter",
    "LocalStackProviderConfig",
    "VaultAdapter",
    "VaultProviderConfig",
]
