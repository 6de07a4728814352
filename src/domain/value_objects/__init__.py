"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.validated_secrets import ValidatedSecrets

__all__ = ["ValidatedSecrets"]
