"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import ProviderInitError, SecretLoadError
    from src.domain.errors import SecretValidationError, FieldViolation
"""

from src.domain.errors.secrets_error import (
    FieldViolation,
    ProviderInitError,
    SecretLoadError,
    SecretsError,
    SecretValidationError,
)

__all__ = [
    "FieldViolation",
    "ProviderInitError",
    "SecretLoadError",
    "SecretsError",
    "SecretValidationError",
]
