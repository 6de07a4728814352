"""Secrets management error types.

Raised when a secrets backend cannot be constructed, when a secret bundle
cannot be loaded, or when a loaded bundle fails schema validation. All three
abort application startup; only provider health checks swallow them.

Usage:
    from src.core.enums import ErrorCode
    from src.domain.errors import SecretLoadError

    raise SecretLoadError(
        "Failed to read secrets from path 'secret/data/app'",
        provider="vault",
        code=ErrorCode.SECRET_LOAD_FAILED,
        cause=error,
    ) from error
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


class SecretsError(Exception):
    """Base exception for secrets management failures.

    Attributes:
        message: Human-readable cause (never contains secret values).
        provider: Backend label ("vault", "localstack") or the rejected token.
        code: Machine-readable ErrorCode.
        cause: Underlying exception, preserved for diagnostics.
        details: Additional non-sensitive context.
    """

    default_code: ErrorCode = ErrorCode.SECRET_LOAD_FAILED

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        code: ErrorCode | None = None,
        cause: BaseException | None = None,
        details: dict[str, str] | None = None,
    ) -> None:
        self.message = message
        self.provider = provider
        self.code = code or self.default_code
        self.cause = cause
        self.details = details or {}
        super().__init__(f"[{provider}] {message}" if provider else message)


class ProviderInitError(SecretsError):
    """Provider configuration or client construction failed.

    Always fatal at startup and never retried automatically.
    """

    default_code = ErrorCode.PROVIDER_INIT_FAILED


class SecretLoadError(SecretsError):
    """Backend reachable-but-failed, malformed response, or secret absent."""

    default_code = ErrorCode.SECRET_LOAD_FAILED


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Single schema violation.

    Attributes:
        field: Original secret key (e.g. "DATABASE_PASSWORD").
        reason: Why the value was rejected.
    """

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class SecretValidationError(SecretsError):
    """Loaded bundle does not satisfy the secrets schema.

    Aggregates every violated field so the operator sees the full picture
    in a single startup failure.

    Attributes:
        violations: All field violations, in schema order.
    """

    default_code = ErrorCode.SECRETS_VALIDATION_FAILED

    def __init__(
        self,
        violations: list[FieldViolation],
        *,
        provider: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.violations = list(violations)
        joined = "; ".join(str(v) for v in self.violations)
        super().__init__(
            f"Secret validation failed: {joined}",
            provider=provider,
            cause=cause,
            details={"fields": ", ".join(self.fields)},
        )

    @property
    def fields(self) -> list[str]:
        """Names of every field that failed validation."""
        return [v.field for v in self.violations]
