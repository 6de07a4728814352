"""Test suite for the secrets gate API.

Test structure:
- unit/: Unit tests - domain, adapters (mocked hvac, moto), container, scripts
- api/: API endpoint tests - HTTP surface with an in-memory backend
- smoke/: Smoke tests - full startup against moto-backed Secrets Manager

No test requires a running Vault or LocalStack container.
"""
