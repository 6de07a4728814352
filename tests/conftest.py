"""Pytest configuration and shared fixtures.

Fixtures:
- mock_logger: LoggerProtocol double whose bind() returns itself
- valid_raw_secrets: Minimal bundle that passes schema validation
- fake_provider: In-memory SecretsProviderProtocol implementation
"""

from unittest.mock import Mock

import pytest

from src.core.enums import SecretProviderType
from src.domain.errors import SecretLoadError


class FakeSecretsProvider:
    """In-memory secrets backend for tests.

    Raises the configured error from load_secrets() when one is set.
    """

    def __init__(
        self,
        secrets: dict[str, str] | None = None,
        *,
        name: SecretProviderType = SecretProviderType.VAULT,
        error: Exception | None = None,
        healthy: bool = True,
    ) -> None:
        self.name = name
        self._secrets = secrets or {}
        self._error = error
        self._healthy = healthy
        self.load_calls = 0

    def load_secrets(self) -> dict[str, str]:
        self.load_calls += 1
        if self._error is not None:
            raise self._error
        return dict(self._secrets)

    def health_check(self) -> bool:
        return self._healthy


def make_valid_raw_secrets() -> dict[str, str]:
    """Build a bundle that satisfies every required field."""
    return {
        "DATABASE_HOST": "localhost",
        "DATABASE_PORT": "5432",
        "DATABASE_USER": "postgres",
        "DATABASE_PASSWORD": "dev_password_123",
        "DATABASE_NAME": "app_development",
    }


@pytest.fixture
def valid_raw_secrets() -> dict[str, str]:
    """Raw bundle with all required keys, values as strings."""
    return make_valid_raw_secrets()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double; bind() returns the same mock so calls are observable."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def fake_provider(valid_raw_secrets) -> FakeSecretsProvider:
    """Healthy Vault-labelled backend returning a valid bundle."""
    return FakeSecretsProvider(valid_raw_secrets)


@pytest.fixture
def failing_provider() -> FakeSecretsProvider:
    """Backend whose load_secrets() raises SecretLoadError."""
    return FakeSecretsProvider(
        error=SecretLoadError("Failed to read secrets", provider="vault")
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")
