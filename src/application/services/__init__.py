"""Application services.

Usage:
    from src.application.services import SecretsBootstrapService
"""

from src.application.services.secrets_bootstrap_service import (
    SecretsBootstrapService,
    mirror_secrets_to_environment,
)

__all__ = ["SecretsBootstrapService", "mirror_secrets_to_environment"]
