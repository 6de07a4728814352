"""Shared helpers for the backend seeding scripts."""

import time
from collections.abc import Callable, Mapping

from src.domain.protocols import LoggerProtocol

SAMPLE_SECRETS: dict[str, str] = {
    "DATABASE_HOST": "localhost",
    "DATABASE_PORT": "5432",
    "DATABASE_USER": "postgres",
    "DATABASE_PASSWORD": "dev_password_123",
    "DATABASE_NAME": "app_development",
    "CLOUDFLARE_API_KEY": "cf_dev_api_key_example_abc123",
    "NEW_RELIC_LICENSE_KEY": "nr_dev_license_key_example_xyz789",
}
"""Development-only secret set written by both seeding scripts."""

MAX_RETRIES = 10
RETRY_DELAY_SECONDS = 2.0


class SetupError(Exception):
    """Seeding a backend failed; the script exits with status 1."""


def wait_until_ready(
    probe: Callable[[], bool],
    *,
    name: str,
    logger: LoggerProtocol,
    max_retries: int = MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Poll a readiness probe a bounded number of times.

    Args:
        probe: Returns True when the backend is ready. Exceptions count as
            "not ready".
        name: Backend name for log messages.
        logger: Structured logger.
        max_retries: Number of probe attempts.
        retry_delay: Seconds between attempts.
        sleep: Sleep function (injectable for tests).

    Raises:
        SetupError: If the backend is not ready after max_retries attempts.
    """
    for attempt in range(1, max_retries + 1):
        try:
            if probe():
                logger.info("Backend is ready", backend=name, attempt=attempt)
                return
            logger.warning(
                "Backend is not ready, waiting",
                backend=name,
                attempt=attempt,
                max_retries=max_retries,
            )
        except Exception as e:
            logger.warning(
                "Failed to connect to backend, retrying",
                backend=name,
                attempt=attempt,
                max_retries=max_retries,
                error=str(e),
            )

        if attempt < max_retries:
            sleep(retry_delay)

    raise SetupError(f"{name} is not ready after {max_retries} attempts")


def verify_round_trip(
    loaded: Mapping[str, str], expected: Mapping[str, str] = SAMPLE_SECRETS
) -> None:
    """Check that every expected key was read back with its value.

    Raises:
        SetupError: Naming the missing or mismatched keys (never values).
    """
    missing = [key for key in expected if key not in loaded]
    if missing:
        raise SetupError(f"Missing secrets: {', '.join(missing)}")

    mismatched = [key for key in expected if str(loaded[key]) != expected[key]]
    if mismatched:
        raise SetupError(f"Secrets with unexpected values: {', '.join(mismatched)}")
