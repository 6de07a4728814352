"""Machine-readable error codes for the secrets subsystem.

Error codes follow ENTITY_ACTION_REASON naming convention and are carried
by every SecretsError so operators and tests can branch on the failure kind
without parsing messages.

Categories:
- Provider errors (PROVIDER_*): configuration / client construction
- Secret errors (SECRET_*): loading and parsing secret payloads
- Validation errors (SECRETS_VALIDATION_*): schema violations
"""

from enum import Enum


class ErrorCode(Enum):
    """Secrets subsystem error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Provider errors
    PROVIDER_UNKNOWN = "provider_unknown"
    PROVIDER_INIT_FAILED = "provider_init_failed"

    # Secret loading errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_LOAD_FAILED = "secret_load_failed"
    SECRET_INVALID_RESPONSE = "secret_invalid_response"
    SECRET_INVALID_JSON = "secret_invalid_json"

    # Validation errors
    SECRETS_VALIDATION_FAILED = "secrets_validation_failed"
