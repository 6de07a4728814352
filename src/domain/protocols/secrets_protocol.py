"""Secrets provider protocol (port) for hexagonal architecture.

This protocol defines what the application needs from a secrets backend.
Infrastructure provides concrete implementations (adapters) that satisfy it
structurally, without inheriting from it.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (VaultAdapter, LocalStackAdapter)
    - Container selects exactly one adapter per process (SECRET_PROVIDER)
"""

from typing import Protocol

from src.core.enums import SecretProviderType

type SecretBundle = dict[str, str]
"""Raw key/value secrets as returned by a backend, before validation."""


class SecretsProviderProtocol(Protocol):
    """Protocol for secrets backends.

    Applications are READ-ONLY consumers of secrets. Seeding a backend is an
    operator task (see src/scripts/).

    Implementations:
        - VaultAdapter: HashiCorp Vault KV v2
        - LocalStackAdapter: AWS Secrets Manager (LocalStack or AWS)
    """

    name: SecretProviderType
    """Fixed label identifying the backend variant."""

    def load_secrets(self) -> SecretBundle:
        """Fetch the current secret bundle from the backend.

        No retry is performed; retry policy belongs to the caller.

        Returns:
            Raw key/value mapping, unmodified from the backend payload.

        Raises:
            SecretLoadError: Backend unreachable, malformed response, or the
                expected secret object is absent.
        """
        ...

    def health_check(self) -> bool:
        """Best-effort, read-only backend probe.

        Returns:
            True if the backend is usable, False on any failure. Never raises.
        """
        ...
