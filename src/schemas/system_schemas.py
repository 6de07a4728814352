"""System endpoint response schemas.

Pydantic schemas for the root and health endpoints.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Root endpoint response.

    Attributes:
        message: Service banner.
        documentation: Path of the interactive API docs.
        health: Path of the health endpoint.
        provider: Configured secrets backend token.
    """

    message: str = Field(..., description="Service banner")
    documentation: str = Field("/docs", description="Interactive API docs path")
    health: str = Field("/health", description="Health endpoint path")
    provider: str = Field(..., description="Secrets backend", examples=["vault"])


class HealthResponse(BaseModel):
    """Application health response.

    Attributes:
        status: "healthy" once secrets are published.
        timestamp: Time of the check (UTC).
        uptime: Seconds since the application module loaded.
        provider: Secrets backend token.
        secrets_loaded: Whether secrets were published.
        version: Application version.
    """

    status: Literal["healthy", "unhealthy"] = Field(..., description="Health status")
    timestamp: datetime = Field(..., description="Check time (UTC)")
    uptime: float = Field(..., ge=0, description="Uptime in seconds")
    provider: str = Field(..., description="Secrets backend", examples=["vault"])
    secrets_loaded: bool = Field(..., description="Whether secrets are loaded")
    version: str = Field(..., description="Application version")


class ProviderHealthResponse(BaseModel):
    """Secrets backend health response.

    Attributes:
        provider: Secrets backend token.
        healthy: Result of the backend health check.
        checked_at: Time of the check (UTC).
    """

    provider: str = Field(..., description="Secrets backend", examples=["vault"])
    healthy: bool = Field(..., description="Backend health check result")
    checked_at: datetime = Field(..., description="Check time (UTC)")
