"""LoggerProtocol definition for structured logging.

Keeps the secrets adapters and the bootstrap gate independent of the logging
backend. Implementations MUST emit structured logs (message + key-value
context) and MUST NOT emit secret values.

Security:
    - Log secret key NAMES and counts, never values
    - Connection tokens and credentials are redacted by the adapter, but
      callers should not pass them in the first place

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Secrets loaded", provider="vault", count=5)

    provider_logger = logger.bind(provider="vault")
    provider_logger.warning("Vault health check failed")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            vault_logger = logger.bind(provider="vault")
            vault_logger.info("Vault provider initialized")
        """
        ...
