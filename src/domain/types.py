"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import DatabasePassword, HttpUrlStr, NonEmptyStr

    class ValidatedSecrets(BaseModel):
        database_host: NonEmptyStr = Field(alias="DATABASE_HOST")
        database_password: DatabasePassword = Field(alias="DATABASE_PASSWORD")
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators.functions import validate_http_url, validate_port

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String that must contain at least one character."""

PortNumber = Annotated[
    int,
    Field(description="TCP port", examples=[5432]),
    AfterValidator(validate_port),
]
"""TCP port in 1..65535.

Numeric strings are coerced by Pydantic's lax mode ("5432" -> 5432).
"""

DatabasePassword = Annotated[
    str,
    Field(min_length=8, description="Database password (never logged)"),
]
"""Database password, minimum 8 characters."""

HttpUrlStr = Annotated[
    str,
    Field(description="Absolute http(s) URL", examples=["https://r2.example.com"]),
    AfterValidator(validate_http_url),
]
"""http(s) URL kept as the original string (no normalization)."""
