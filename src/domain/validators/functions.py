"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types
(src/domain/types.py) and Settings field validators.
Validators are pure functions that raise ValueError on validation failure.
"""

from urllib.parse import urlparse


def validate_http_url(v: str) -> str:
    """Validate an absolute http(s) URL.

    The value is returned verbatim so secrets and settings keep exactly the
    string the operator supplied.

    Args:
        v: URL to validate.

    Returns:
        URL unchanged (validation only).

    Raises:
        ValueError: If the scheme is not http/https or the host is missing.

    Example:
        >>> validate_http_url("http://localhost:8200")
        'http://localhost:8200'
        >>> validate_http_url("localhost:8200")
        ValueError: Invalid URL (expected http:// or https://): localhost:8200
    """
    parsed = urlparse(v)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"Invalid URL (expected http:// or https://): {v}")
    return v


def validate_port(v: int) -> int:
    """Validate a TCP port number.

    Args:
        v: Port number.

    Returns:
        Port unchanged (validation only).

    Raises:
        ValueError: If port is outside 1..65535.

    Example:
        >>> validate_port(5432)
        5432
        >>> validate_port(0)
        ValueError: Port must be between 1 and 65535
    """
    if not 1 <= v <= 65535:
        raise ValueError("Port must be between 1 and 65535")
    return v
