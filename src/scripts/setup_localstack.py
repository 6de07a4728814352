#!/usr/bin/env python3
"""
LocalStack seeding script.

Configures AWS Secrets Manager in a LocalStack container with the sample
secret set:
- Waits for the secretsmanager service to report available
- Force-deletes any existing secret with the configured name
- Creates the secret with the sample set as a JSON object
- Reads it back through LocalStackAdapter and verifies every key

Usage:
    python -m src.scripts.setup_localstack
"""

import json
import sys
import time
from collections.abc import Callable
from typing import Any

import boto3
import httpx
from botocore.exceptions import BotoCoreError, ClientError

from src.core.config import get_settings
from src.core.container import get_logger
from src.domain.errors import SecretsError
from src.domain.protocols import LoggerProtocol
from src.infrastructure.secrets import LocalStackAdapter, LocalStackProviderConfig
from src.scripts.common import (
    SAMPLE_SECRETS,
    SetupError,
    verify_round_trip,
    wait_until_ready,
)

READY_STATES = frozenset({"available", "running"})


def localstack_is_ready(endpoint: str) -> bool:
    """True when LocalStack reports secretsmanager available or running."""
    response = httpx.get(f"{endpoint}/_localstack/health", timeout=5.0)
    response.raise_for_status()
    services = response.json().get("services", {})
    return services.get("secretsmanager") in READY_STATES


def delete_existing_secret(client: Any, secret_name: str, logger: LoggerProtocol) -> None:
    """Force-delete the secret; a missing secret is not an error."""
    try:
        client.delete_secret(SecretId=secret_name, ForceDeleteWithoutRecovery=True)
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") != "ResourceNotFoundException":
            raise
        logger.info("Secret does not exist, proceeding", secret_name=secret_name)
        return

    logger.info("Deleted existing secret", secret_name=secret_name)


def setup_localstack(
    config: LocalStackProviderConfig,
    *,
    logger: LoggerProtocol,
    client: Any = None,
    probe: Callable[[], bool] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Seed Secrets Manager and verify the application can read it back.

    Args:
        config: Target region, credentials, endpoint and secret name.
        logger: Structured logger.
        client: Secrets Manager client; built from config when omitted.
        probe: Readiness probe; polls the LocalStack health URL when omitted.
        sleep: Sleep function between readiness attempts.

    Raises:
        SetupError: LocalStack never became ready or verification failed.
        SecretsError: The adapter could not read the created secret.
    """
    endpoint = config.endpoint or ""
    wait_until_ready(
        probe or (lambda: localstack_is_ready(endpoint)),
        name="LocalStack",
        logger=logger,
        sleep=sleep,
    )

    client = client or boto3.client(
        "secretsmanager",
        region_name=config.region,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        endpoint_url=config.endpoint_url,
    )

    delete_existing_secret(client, config.secret_name, logger)
    response = client.create_secret(
        Name=config.secret_name,
        SecretString=json.dumps(SAMPLE_SECRETS, indent=2),
        Description="Development secrets for Secrets Management Demo API",
    )
    logger.info(
        "Secret created",
        arn=response.get("ARN"),
        version_id=response.get("VersionId"),
        keys=sorted(SAMPLE_SECRETS),
    )

    loaded = LocalStackAdapter(config, logger=logger).load_secrets()
    verify_round_trip(loaded)
    logger.info("Secret verified", count=len(loaded))


def main() -> int:
    """Entry point. Returns the process exit status."""
    settings = get_settings()
    logger = get_logger()
    config = LocalStackProviderConfig(
        region=settings.aws_region,
        access_key_id=settings.aws_access_key_id,
        secret_access_key=settings.aws_secret_access_key,
        secret_name=settings.aws_secret_name,
        endpoint=settings.localstack_endpoint,
        use_localstack=True,
    )
    started = time.monotonic()

    logger.info(
        "Starting LocalStack setup",
        endpoint=config.endpoint,
        region=config.region,
        secret_name=config.secret_name,
    )
    try:
        setup_localstack(config, logger=logger)
    except (SetupError, SecretsError, ClientError, BotoCoreError) as e:
        logger.error("LocalStack setup failed", error=e)
        print(
            "\nLocalStack setup failed. Check that the container is running "
            f"(docker compose up -d localstack): {config.endpoint}/_localstack/health",
            file=sys.stderr,
        )
        return 1

    logger.info(
        "LocalStack setup completed",
        duration_ms=round((time.monotonic() - started) * 1000),
        secrets_created=len(SAMPLE_SECRETS),
    )
    print("\nLocalStack setup completed. Start the API with SECRET_PROVIDER=localstack")
    return 0


if __name__ == "__main__":
    sys.exit(main())
