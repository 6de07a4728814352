"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Enums (environment, secrets backend token, error codes)
- Application settings (src.core.config)
- Write-once published secrets state (src.core.secrets_state)
- Dependency injection container (src.core.container)

The enums have NO dependencies on other application layers.
"""

from src.core.enums import Environment, ErrorCode, SecretProviderType

__all__ = [
    "Environment",
    "ErrorCode",
    "SecretProviderType",
]
