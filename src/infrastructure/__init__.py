"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Secrets backends (HashiCorp Vault, AWS Secrets Manager / LocalStack)
- Structured logging (structlog)

Structure:
- secrets/: Secrets backend adapters and their connection settings
- logging/: Console logging adapter with sensitive-key redaction

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
