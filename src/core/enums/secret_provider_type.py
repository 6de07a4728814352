"""Secrets backend selection token.

Exactly one backend is active per process, chosen by the SECRET_PROVIDER
setting. String enum so members compare equal to their raw tokens
(``SecretProviderType.VAULT == "vault"``).
"""

from enum import Enum


class SecretProviderType(str, Enum):
    """Known secrets backends."""

    VAULT = "vault"
    """HashiCorp Vault, KV v2 engine, token authentication."""

    LOCALSTACK = "localstack"
    """AWS Secrets Manager API (LocalStack emulator or real AWS)."""
