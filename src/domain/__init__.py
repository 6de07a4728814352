"""Domain layer - secrets model and ports.

Structure:
- errors/: Secrets error taxonomy (init, load, validation)
- protocols/: Ports (secrets provider, logger)
- providers/: Registry of supported secrets backends
- validators/: Pure validation functions and the secrets schema validator
- value_objects/: ValidatedSecrets (immutable, schema-checked)
- types.py: Annotated types shared by the schema and settings

The domain layer defines WHAT a valid secret set is, not HOW it is fetched.
"""
