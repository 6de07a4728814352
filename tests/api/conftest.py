"""Fixtures for HTTP tests.

The app lifespan runs the real bootstrap gate against an in-memory backend,
so every test starts from freshly published secrets.
"""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_secrets_provider, get_secrets_state
from src.main import app
from tests.conftest import FakeSecretsProvider


def reset_container() -> None:
    get_secrets_provider.cache_clear()
    get_secrets_state.cache_clear()


@pytest.fixture
def backend(valid_raw_secrets) -> FakeSecretsProvider:
    """Backend the app loads from; tests may replace it before app_client."""
    return FakeSecretsProvider(valid_raw_secrets)


@pytest.fixture
def app_client(backend) -> Iterator[TestClient]:
    """TestClient with the lifespan executed (secrets bootstrapped)."""
    reset_container()
    with (
        patch.dict(os.environ),
        patch(
            "src.core.container.secrets.create_secrets_provider",
            return_value=backend,
        ),
        TestClient(app) as client,
    ):
        yield client
    reset_container()
