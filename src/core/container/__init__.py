"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_secrets_provider, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging, published secrets state)
- secrets: Secrets backend factory and startup gate
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger, get_secrets_state

# Secrets backends
from src.core.container.secrets import (
    bootstrap_secrets,
    create_secrets_provider,
    get_available_provider_types,
    get_current_provider_type,
    get_secrets_provider,
)

__all__ = [
    # Infrastructure
    "get_logger",
    "get_secrets_state",
    # Secrets
    "bootstrap_secrets",
    "create_secrets_provider",
    "get_available_provider_types",
    "get_current_provider_type",
    "get_secrets_provider",
]
