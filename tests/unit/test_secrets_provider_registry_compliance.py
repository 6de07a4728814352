"""Secrets provider registry compliance tests.

Self-enforcing tests that verify registry completeness and prevent drift.
These tests fail if:
- Registry entry exists but no factory case in the container
- SecretProviderType member exists but no registry entry
- Metadata incomplete or required settings unknown to Settings
"""

import pytest
from moto import mock_aws

from src.core.config import Settings
from src.core.container import create_secrets_provider
from src.core.enums import SecretProviderType
from src.domain.providers.registry import (
    SECRETS_PROVIDER_REGISTRY,
    CostModel,
    SetupComplexity,
    get_all_provider_slugs,
    get_provider_metadata,
)


@pytest.mark.unit
class TestSecretsProviderRegistryCompleteness:
    """Test suite for registry completeness and consistency."""

    @mock_aws
    def test_all_registered_providers_can_be_instantiated(self, mock_logger):
        """Verify every registry entry has a working factory case."""
        for metadata in SECRETS_PROVIDER_REGISTRY:
            provider = create_secrets_provider(metadata.slug.value, logger=mock_logger)

            assert provider.name == metadata.slug

    def test_every_enum_member_is_registered(self):
        assert set(get_all_provider_slugs()) == set(SecretProviderType)

    def test_slugs_are_unique(self):
        slugs = get_all_provider_slugs()

        assert len(slugs) == len(set(slugs))

    def test_metadata_is_complete(self):
        for metadata in SECRETS_PROVIDER_REGISTRY:
            assert metadata.display_name
            assert metadata.description
            assert metadata.pros
            assert metadata.cons
            assert isinstance(metadata.setup_complexity, SetupComplexity)
            assert isinstance(metadata.cost, CostModel)

    def test_required_settings_exist_on_settings(self):
        for metadata in SECRETS_PROVIDER_REGISTRY:
            for setting_name in metadata.required_settings:
                assert setting_name in Settings.model_fields, (
                    f"{metadata.slug.value} requires unknown setting {setting_name}"
                )


@pytest.mark.unit
class TestSecretsProviderRegistryHelpers:
    """Test lookup helpers."""

    def test_get_provider_metadata_by_string(self):
        metadata = get_provider_metadata("vault")

        assert metadata is not None
        assert metadata.slug == SecretProviderType.VAULT
        assert metadata.supports_rotation is True

    def test_get_provider_metadata_unknown(self):
        assert get_provider_metadata("aws") is None

    def test_localstack_feature_flags(self):
        metadata = get_provider_metadata("localstack")

        assert metadata.setup_complexity == SetupComplexity.LOW
        assert metadata.supports_versioning is True
        assert metadata.supports_rotation is False
        assert metadata.supports_audit_logs is False
