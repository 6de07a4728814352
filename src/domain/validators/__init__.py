"""Validators package exports.

Exports the pure validator functions used by Annotated types and Settings.
Secrets schema validation lives in
src.domain.validators.secrets_validator (imported by full path to keep the
value_objects -> types -> validators import chain acyclic).
"""

from src.domain.validators.functions import validate_http_url, validate_port

__all__ = [
    "validate_http_url",
    "validate_port",
]
