"""Unit tests for VaultAdapter (HashiCorp Vault KV v2).

Tests cover:
- Initialization and configuration validation
- load_secrets() success and every failure mode
- health_check() via seal status, never raising

Architecture:
- hvac.Client is mocked; NO real Vault dependency
"""

from unittest.mock import Mock, patch

import pytest
from hvac.exceptions import Forbidden

from src.core.enums import ErrorCode, SecretProviderType
from src.domain.errors import ProviderInitError, SecretLoadError
from src.infrastructure.secrets import VaultAdapter, VaultProviderConfig

SECRET_PATH = "secret/data/widget-server"


@pytest.fixture
def vault_config() -> VaultProviderConfig:
    return VaultProviderConfig(
        endpoint="http://localhost:8200",
        token="root",
        secret_path=SECRET_PATH,
    )


@pytest.fixture
def mock_hvac_client():
    with patch("src.infrastructure.secrets.vault_adapter.hvac.Client") as client_class:
        client = Mock()
        client_class.return_value = client
        yield client


@pytest.fixture
def adapter(vault_config, mock_hvac_client, mock_logger) -> VaultAdapter:
    return VaultAdapter(vault_config, logger=mock_logger)


@pytest.mark.unit
class TestVaultAdapterInitialization:
    """Test VaultAdapter construction."""

    def test_builds_client_with_url_and_token(self, vault_config, mock_logger):
        """Test hvac.Client receives the endpoint and token."""
        with patch(
            "src.infrastructure.secrets.vault_adapter.hvac.Client"
        ) as client_class:
            VaultAdapter(vault_config, logger=mock_logger)

        client_class.assert_called_once_with(url="http://localhost:8200", token="root")

    def test_name_is_vault(self, adapter):
        """Test the fixed provider label."""
        assert adapter.name == SecretProviderType.VAULT
        assert adapter.name == "vault"

    def test_binds_provider_to_logger(self, adapter, mock_logger):
        """Test logs carry the provider label."""
        mock_logger.bind.assert_called_once_with(provider="vault")

    @pytest.mark.parametrize(
        "endpoint,secret_path", [("", SECRET_PATH), ("http://localhost:8200", "")]
    )
    def test_missing_config_raises_provider_init_error(
        self, endpoint, secret_path, mock_logger
    ):
        """Test empty endpoint or path fails at construction."""
        config = VaultProviderConfig(
            endpoint=endpoint, token="root", secret_path=secret_path
        )

        with pytest.raises(ProviderInitError) as exc_info:
            VaultAdapter(config, logger=mock_logger)

        assert exc_info.value.provider == "vault"
        assert exc_info.value.code == ErrorCode.PROVIDER_INIT_FAILED

    def test_client_construction_failure_raises_provider_init_error(
        self, vault_config, mock_logger
    ):
        """Test hvac errors are wrapped with the cause preserved."""
        cause = ValueError("bad url")
        with patch(
            "src.infrastructure.secrets.vault_adapter.hvac.Client", side_effect=cause
        ):
            with pytest.raises(ProviderInitError) as exc_info:
                VaultAdapter(vault_config, logger=mock_logger)

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause


@pytest.mark.unit
class TestVaultAdapterLoadSecrets:
    """Test VaultAdapter.load_secrets()."""

    def test_returns_inner_mapping(self, adapter, mock_hvac_client, valid_raw_secrets):
        """Test the data.data mapping is returned unmodified."""
        mock_hvac_client.read.return_value = {
            "data": {"data": valid_raw_secrets, "metadata": {"version": 3}}
        }

        secrets = adapter.load_secrets()

        assert secrets == valid_raw_secrets
        mock_hvac_client.read.assert_called_once_with(SECRET_PATH)

    def test_logs_key_names_not_values(
        self, adapter, mock_hvac_client, mock_logger, valid_raw_secrets
    ):
        """Test the success log carries names and count only."""
        mock_hvac_client.read.return_value = {"data": {"data": valid_raw_secrets}}

        adapter.load_secrets()

        _, kwargs = mock_logger.info.call_args
        assert kwargs["count"] == len(valid_raw_secrets)
        assert "DATABASE_PASSWORD" in kwargs["keys"]
        assert "dev_password_123" not in str(mock_logger.mock_calls)

    def test_transport_error_raises_secret_load_error(self, adapter, mock_hvac_client):
        """Test connection errors become SECRET_LOAD_FAILED naming the path."""
        cause = ConnectionError("connection refused")
        mock_hvac_client.read.side_effect = cause

        with pytest.raises(SecretLoadError) as exc_info:
            adapter.load_secrets()

        error = exc_info.value
        assert error.code == ErrorCode.SECRET_LOAD_FAILED
        assert error.provider == "vault"
        assert SECRET_PATH in error.message
        assert error.cause is cause

    def test_auth_error_raises_secret_load_error(self, adapter, mock_hvac_client):
        """Test a rejected token becomes SECRET_LOAD_FAILED."""
        mock_hvac_client.read.side_effect = Forbidden("permission denied")

        with pytest.raises(SecretLoadError) as exc_info:
            adapter.load_secrets()

        assert exc_info.value.code == ErrorCode.SECRET_LOAD_FAILED

    def test_absent_secret_raises_not_found(self, adapter, mock_hvac_client):
        """Test a None read result (nothing stored) is SECRET_NOT_FOUND."""
        mock_hvac_client.read.return_value = None

        with pytest.raises(SecretLoadError) as exc_info:
            adapter.load_secrets()

        assert exc_info.value.code == ErrorCode.SECRET_NOT_FOUND
        assert SECRET_PATH in exc_info.value.message

    @pytest.mark.parametrize(
        "response",
        [
            {},
            {"data": {}},
            {"data": {"data": None}},
            {"data": {"data": "not-a-mapping"}},
            {"data": "not-a-mapping"},
            ["unexpected"],
        ],
    )
    def test_malformed_response_raises_invalid_response(
        self, adapter, mock_hvac_client, response
    ):
        """Test a missing KV v2 envelope is an error, not an empty bundle."""
        mock_hvac_client.read.return_value = response

        with pytest.raises(SecretLoadError) as exc_info:
            adapter.load_secrets()

        assert exc_info.value.code == ErrorCode.SECRET_INVALID_RESPONSE
        assert SECRET_PATH in exc_info.value.message


@pytest.mark.unit
class TestVaultAdapterHealthCheck:
    """Test VaultAdapter.health_check()."""

    def test_healthy_when_initialized_and_unsealed(self, adapter, mock_hvac_client):
        mock_hvac_client.sys.read_seal_status.return_value = {
            "initialized": True,
            "sealed": False,
        }

        assert adapter.health_check() is True

    @pytest.mark.parametrize(
        "status",
        [
            {"initialized": True, "sealed": True},
            {"initialized": False, "sealed": False},
            {},
        ],
    )
    def test_unhealthy_states(self, adapter, mock_hvac_client, status):
        mock_hvac_client.sys.read_seal_status.return_value = status

        assert adapter.health_check() is False

    def test_exception_returns_false(self, adapter, mock_hvac_client):
        """Test probe errors are swallowed."""
        mock_hvac_client.sys.read_seal_status.side_effect = ConnectionError(
            "connection refused"
        )

        assert adapter.health_check() is False

    def test_non_json_status_returns_false(
        self, adapter, mock_hvac_client, mock_logger
    ):
        """Test a raw Response (non-JSON body) is unhealthy, not an error."""
        raw_response = Mock(spec=["status_code", "text"])
        raw_response.status_code = 200
        raw_response.text = "<html>proxy</html>"
        mock_hvac_client.sys.read_seal_status.return_value = raw_response

        assert adapter.health_check() is False
        mock_logger.warning.assert_called_once()

    def test_does_not_read_secret(self, adapter, mock_hvac_client):
        """Test the probe never touches the KV path."""
        mock_hvac_client.sys.read_seal_status.return_value = {
            "initialized": True,
            "sealed": False,
        }

        adapter.health_check()

        mock_hvac_client.read.assert_not_called()
        mock_hvac_client.write.assert_not_called()
