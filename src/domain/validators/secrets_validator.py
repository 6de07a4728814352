"""Secrets schema validation.

Turns a raw secret bundle into ValidatedSecrets, or raises a single
SecretValidationError listing every violated field.
"""

from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from src.domain.errors import FieldViolation, SecretValidationError
from src.domain.value_objects.validated_secrets import ValidatedSecrets


def validate_secrets(
    raw: Mapping[str, object], *, provider: str | None = None
) -> ValidatedSecrets:
    """Validate and coerce a raw secret bundle.

    Pure function: no I/O, no logging, input is not mutated.

    Args:
        raw: Key/value mapping as returned by a secrets backend.
        provider: Backend label, attached to the error for diagnostics.

    Returns:
        ValidatedSecrets with required fields present and typed.

    Raises:
        SecretValidationError: With one FieldViolation per violated field.

    Example:
        >>> validate_secrets({"DATABASE_HOST": "db"})
        SecretValidationError: Secret validation failed: DATABASE_PORT: Field
        required; DATABASE_USER: Field required; ...
    """
    try:
        return ValidatedSecrets.model_validate(dict(raw))
    except PydanticValidationError as e:
        violations = [
            FieldViolation(
                field=".".join(str(part) for part in error["loc"]) or "<root>",
                reason=error["msg"],
            )
            for error in e.errors()
        ]
        raise SecretValidationError(violations, provider=provider, cause=e) from e
