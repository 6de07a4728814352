"""ValidatedSecrets value object.

Schema-checked, typed secret record consumed read-only by the rest of the
process. Built once at startup from a raw secret bundle (see
src/domain/validators/secrets_validator.py) and never mutated afterwards.

Fields are populated from the backend's original upper-case keys (aliases);
unknown keys are dropped. Secret-bearing fields are excluded from repr().
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import DatabasePassword, HttpUrlStr, NonEmptyStr, PortNumber


class ValidatedSecrets(BaseModel):
    """Immutable application secrets.

    Required:
        DATABASE_HOST, DATABASE_PORT, DATABASE_USER, DATABASE_PASSWORD,
        DATABASE_NAME

    Optional:
        Cloudflare R2 credentials and New Relic telemetry key.

    Example:
        >>> secrets = ValidatedSecrets.model_validate({
        ...     "DATABASE_HOST": "localhost",
        ...     "DATABASE_PORT": "5432",
        ...     "DATABASE_USER": "postgres",
        ...     "DATABASE_PASSWORD": "dev_password_123",
        ...     "DATABASE_NAME": "app",
        ... })
        >>> secrets.database_port
        5432
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    # Database (required)
    database_host: NonEmptyStr = Field(alias="DATABASE_HOST")
    database_port: PortNumber = Field(alias="DATABASE_PORT")
    database_user: NonEmptyStr = Field(alias="DATABASE_USER")
    database_password: DatabasePassword = Field(alias="DATABASE_PASSWORD", repr=False)
    database_name: NonEmptyStr = Field(alias="DATABASE_NAME")

    # Cloudflare R2 (optional)
    cloudflare_api_key: str | None = Field(
        default=None, alias="CLOUDFLARE_API_KEY", repr=False
    )
    cloudflare_access_key_id: str | None = Field(
        default=None, alias="CLOUDFLARE_ACCESS_KEY_ID", repr=False
    )
    cloudflare_secret_access_key: str | None = Field(
        default=None, alias="CLOUDFLARE_SECRET_ACCESS_KEY", repr=False
    )
    cloudflare_bucket_name: str | None = Field(
        default=None, alias="CLOUDFLARE_BUCKET_NAME"
    )
    cloudflare_account_id: str | None = Field(
        default=None, alias="CLOUDFLARE_ACCOUNT_ID"
    )
    cloudflare_endpoint: HttpUrlStr | None = Field(
        default=None, alias="CLOUDFLARE_ENDPOINT"
    )

    # New Relic (optional)
    new_relic_license_key: str | None = Field(
        default=None, alias="NEW_RELIC_LICENSE_KEY", repr=False
    )
    new_relic_app_name: str | None = Field(default=None, alias="NEW_RELIC_APP_NAME")

    def to_environment(self) -> dict[str, str]:
        """Return present values keyed by their original secret names.

        Returns:
            Mapping like {"DATABASE_PORT": "5432", ...}; absent optional
            fields are omitted.
        """
        return {
            key: str(value)
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }

    def masked_connection_string(self) -> str:
        """PostgreSQL connection string with the password masked."""
        return (
            f"postgresql://{self.database_user}:***@"
            f"{self.database_host}:{self.database_port}/{self.database_name}"
        )
