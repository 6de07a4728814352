"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorCode, Environment, SecretProviderType
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.secret_provider_type import SecretProviderType

__all__ = ["ErrorCode", "Environment", "SecretProviderType"]
