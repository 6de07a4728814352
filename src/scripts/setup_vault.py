#!/usr/bin/env python3
"""
Vault seeding script.

Configures a development Vault with the sample secret set:
- Waits for Vault to be initialized and unsealed
- Enables a KV v2 engine at the configured mount (if missing)
- Writes the sample secrets to the path derived from VAULT_SECRET_PATH
- Reads them back through VaultAdapter and verifies every key

Idempotent: safe to run multiple times (the secret gets a new version).

Usage:
    python -m src.scripts.setup_vault
"""

import sys
import time
from collections.abc import Callable, Mapping

import hvac
from hvac.exceptions import InvalidRequest, VaultError
from requests import RequestException

from src.core.config import get_settings
from src.core.container import get_logger
from src.domain.errors import SecretsError
from src.domain.protocols import LoggerProtocol
from src.infrastructure.secrets import VaultAdapter, VaultProviderConfig
from src.scripts.common import (
    SAMPLE_SECRETS,
    SetupError,
    verify_round_trip,
    wait_until_ready,
)


def split_kv2_path(read_path: str) -> tuple[str, str]:
    """Split a KV v2 read path into mount point and secret path.

    Example:
        >>> split_kv2_path("secret/data/widget-server")
        ('secret', 'widget-server')

    Raises:
        SetupError: If either part is empty.
    """
    stripped = read_path.strip("/")
    if "/data/" in stripped:
        mount, _, path = stripped.partition("/data/")
    else:
        mount, _, path = stripped.partition("/")

    if not mount or not path:
        raise SetupError(f"Cannot derive KV v2 mount and path from '{read_path}'")
    return mount, path


def vault_is_ready(client: hvac.Client) -> bool:
    """True when Vault reports initialized and unsealed."""
    status = client.sys.read_seal_status()
    if not isinstance(status, Mapping):
        return False
    return status.get("initialized") is True and status.get("sealed") is False


def ensure_kv_engine(client: hvac.Client, mount: str, logger: LoggerProtocol) -> None:
    """Enable a KV v2 engine at mount unless one is already there."""
    mounts = client.sys.list_mounted_secrets_engines()
    mounted = mounts.get("data", mounts)
    if f"{mount}/" in mounted:
        logger.info("KV secrets engine already enabled", mount=mount)
        return

    try:
        client.sys.enable_secrets_engine(
            backend_type="kv", path=mount, options={"version": "2"}
        )
    except InvalidRequest as e:
        if "path is already in use" not in str(e):
            raise
        logger.info("KV secrets engine already exists", mount=mount)
        return

    logger.info("KV v2 secrets engine enabled", mount=mount)


def setup_vault(
    config: VaultProviderConfig,
    *,
    logger: LoggerProtocol,
    client: hvac.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Seed Vault and verify the application can read the secrets back.

    Raises:
        SetupError: Vault never became ready or verification failed.
        SecretsError: The adapter could not read the written secret.
    """
    mount, path = split_kv2_path(config.secret_path)
    client = client or hvac.Client(url=config.endpoint, token=config.token)

    wait_until_ready(
        lambda: vault_is_ready(client), name="Vault", logger=logger, sleep=sleep
    )
    ensure_kv_engine(client, mount, logger)

    client.secrets.kv.v2.create_or_update_secret(
        path=path, secret=SAMPLE_SECRETS, mount_point=mount
    )
    logger.info(
        "Secrets written to Vault",
        mount=mount,
        path=path,
        keys=sorted(SAMPLE_SECRETS),
    )

    loaded = VaultAdapter(config, logger=logger).load_secrets()
    verify_round_trip(loaded)
    logger.info("Secrets verified", count=len(loaded))


def main() -> int:
    """Entry point. Returns the process exit status."""
    settings = get_settings()
    logger = get_logger()
    config = VaultProviderConfig.from_settings(settings)
    started = time.monotonic()

    logger.info(
        "Starting Vault setup",
        endpoint=config.endpoint,
        secret_path=config.secret_path,
    )
    try:
        setup_vault(config, logger=logger)
    except (SetupError, SecretsError, VaultError, RequestException) as e:
        logger.error("Vault setup failed", error=e)
        print(
            "\nVault setup failed. Check that the container is running "
            f"(docker compose up -d vault) and reachable at {config.endpoint}",
            file=sys.stderr,
        )
        return 1

    logger.info(
        "Vault setup completed",
        duration_ms=round((time.monotonic() - started) * 1000),
        secrets_created=len(SAMPLE_SECRETS),
    )
    print(f"\nVault setup completed. UI: {config.endpoint}/ui")
    return 0


if __name__ == "__main__":
    sys.exit(main())
