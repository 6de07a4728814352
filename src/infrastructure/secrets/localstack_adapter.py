"""AWS Secrets Manager adapter (LocalStack or real AWS).

Implements SecretsProviderProtocol using boto3. The whole secret bundle is
stored as one secret whose SecretString is a JSON object of string pairs.

File: localstack_adapter.py -> class LocalStackAdapter (PEP 8 naming)
"""

import json

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode, SecretProviderType
from src.domain.errors import ProviderInitError, SecretLoadError
from src.domain.protocols import LoggerProtocol, SecretBundle
from src.infrastructure.secrets.provider_config import LocalStackProviderConfig


class LocalStackAdapter:
    """Secrets from one AWS Secrets Manager secret.

    When use_localstack is set, calls go to the LocalStack edge endpoint;
    otherwise boto3 resolves the regular AWS endpoint for the region.
    """

    name = SecretProviderType.LOCALSTACK

    def __init__(
        self, config: LocalStackProviderConfig, *, logger: LoggerProtocol
    ) -> None:
        """Initialize the Secrets Manager client.

        Args:
            config: Region, credentials, secret id and optional endpoint.
            logger: Structured logger.

        Raises:
            ProviderInitError: If the secret name is empty or the client
                cannot be constructed.
        """
        self._logger = logger.bind(provider=self.name.value)
        self._config = config

        if not config.secret_name:
            raise ProviderInitError(
                "AWS secret name is required", provider=self.name.value
            )

        try:
            self._client = boto3.client(
                "secretsmanager",
                region_name=config.region,
                aws_access_key_id=config.access_key_id,
                aws_secret_access_key=config.secret_access_key,
                endpoint_url=config.endpoint_url,
            )
        except Exception as e:
            raise ProviderInitError(
                "Failed to initialize AWS Secrets Manager client",
                provider=self.name.value,
                cause=e,
            ) from e

        self._logger.info(
            "LocalStack provider initialized",
            region=config.region,
            secret_name=config.secret_name,
            use_localstack=config.use_localstack,
            endpoint=config.endpoint_url or "default AWS endpoint",
        )

    def load_secrets(self) -> SecretBundle:
        """Fetch and parse the configured secret.

        Returns:
            Parsed JSON object from SecretString.

        Raises:
            SecretLoadError: SECRET_NOT_FOUND if the secret does not exist,
                SECRET_LOAD_FAILED on other client/transport errors,
                SECRET_INVALID_RESPONSE if SecretString is empty or not a
                JSON object, SECRET_INVALID_JSON if it is not valid JSON.
        """
        secret_name = self._config.secret_name
        self._logger.debug(
            "Loading secrets from AWS Secrets Manager", secret_name=secret_name
        )

        try:
            response = self._client.get_secret_value(SecretId=secret_name)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            code = (
                ErrorCode.SECRET_NOT_FOUND
                if error_code == "ResourceNotFoundException"
                else ErrorCode.SECRET_LOAD_FAILED
            )
            raise self._load_error(f"{error_code or 'ClientError'}: {e}", code, e) from e
        except BotoCoreError as e:
            raise self._load_error(str(e), ErrorCode.SECRET_LOAD_FAILED, e) from e

        secret_string = response.get("SecretString")
        if not secret_string:
            raise self._load_error(
                "Secret has no SecretString value", ErrorCode.SECRET_INVALID_RESPONSE
            )

        try:
            secrets = json.loads(secret_string)
        except json.JSONDecodeError as e:
            raise self._load_error(
                f"SecretString is not valid JSON: {e.msg}",
                ErrorCode.SECRET_INVALID_JSON,
                e,
            ) from e

        if not isinstance(secrets, dict):
            raise self._load_error(
                "SecretString must be a JSON object",
                ErrorCode.SECRET_INVALID_RESPONSE,
            )

        self._logger.info(
            "Secrets loaded successfully from AWS Secrets Manager",
            count=len(secrets),
            keys=sorted(secrets),
            version_id=response.get("VersionId"),
        )
        return secrets

    def health_check(self) -> bool:
        """Read the secret again; any failure means unhealthy.

        Returns:
            True if the secret is readable, False otherwise.
        """
        try:
            self._client.get_secret_value(SecretId=self._config.secret_name)
        except Exception as e:
            self._logger.warning(
                "LocalStack health check failed",
                error=str(e),
                secret_name=self._config.secret_name,
            )
            return False

        self._logger.debug(
            "LocalStack health check passed", secret_name=self._config.secret_name
        )
        return True

    def _load_error(
        self,
        reason: str,
        code: ErrorCode,
        cause: BaseException | None = None,
    ) -> SecretLoadError:
        """Log and build a SecretLoadError naming the secret id."""
        secret_name = self._config.secret_name
        self._logger.error(
            "Failed to load secrets from AWS Secrets Manager",
            secret_name=secret_name,
            code=code.value,
            reason=reason,
        )
        return SecretLoadError(
            f"Failed to retrieve secret '{secret_name}': {reason}",
            provider=self.name.value,
            code=code,
            cause=cause,
        )
