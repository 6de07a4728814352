"""Write-once holder for the validated application secrets.

The bootstrap gate publishes exactly once during startup; request handlers
read the same immutable ValidatedSecrets for the rest of the process
lifetime. Reading before publication is a programming error.

Usage:
    from src.core.container import get_secrets_state

    state = get_secrets_state()
    secrets = state.get()
    secrets.database_host
"""

from datetime import UTC, datetime
from threading import Lock

from src.domain.value_objects import ValidatedSecrets


class SecretsState:
    """Initialize-once container for ValidatedSecrets.

    Attributes:
        provider: Label of the backend the secrets came from.
        loaded_at: UTC time of publication.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._secrets: ValidatedSecrets | None = None
        self.provider: str | None = None
        self.loaded_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        """True once publish() has succeeded."""
        return self._secrets is not None

    def publish(self, secrets: ValidatedSecrets, *, provider: str) -> None:
        """Publish the validated secrets.

        Args:
            secrets: Schema-checked secrets.
            provider: Backend label (e.g. "vault").

        Raises:
            RuntimeError: If secrets were already published.
        """
        with self._lock:
            if self._secrets is not None:
                raise RuntimeError("Secrets have already been published")
            self._secrets = secrets
            self.provider = provider
            self.loaded_at = datetime.now(UTC)

    def get(self) -> ValidatedSecrets:
        """Return the published secrets.

        Raises:
            RuntimeError: If called before publish().
        """
        if self._secrets is None:
            raise RuntimeError("Secrets have not been loaded yet")
        return self._secrets
