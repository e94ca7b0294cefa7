"""
Environment configuration management module.

This module provides the immutable Env container that carries validated
configuration values to the rest of the application. Values come from the
schema-driven ConfigLoader; an Env built without arguments holds the
schema defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT
from ..models import CIContext, ProvisionRequest
from .schema import ConfigSchema


@dataclass(frozen=True)
class Env:
    """
    Immutable configuration container for a provisioning run.

    SERVICE_TOKEN and PROJECT_ID may be empty here; the orchestrator
    rejects such a request before any network call is made.
    """

    SERVICE_TOKEN: Optional[str] = None
    PROJECT_ID: Optional[str] = None
    DATABASE_NAME: Optional[str] = None
    REGION: Optional[str] = None
    API_BASE_URL: str = DEFAULT_API_BASE_URL
    TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_config(cls, config: ConfigSchema) -> "Env":
        """Build an Env from a validated configuration schema instance."""
        return cls(
            SERVICE_TOKEN=config.service_token,
            PROJECT_ID=config.project_id,
            DATABASE_NAME=config.database_name,
            REGION=config.region,
            API_BASE_URL=config.api_base_url,
            TIMEOUT_SECONDS=config.timeout_seconds,
        )

    def to_request(self, ci_context: CIContext) -> ProvisionRequest:
        """Build the provisioning request for the given CI context."""
        return ProvisionRequest(
            service_token=self.SERVICE_TOKEN or "",
            project_id=self.PROJECT_ID or "",
            database_name_hint=self.DATABASE_NAME,
            region=self.REGION,
            ci_context=ci_context,
        )

    def to_dict(self) -> dict:
        """Convert environment to dictionary representation."""
        return {
            "INPUT_SERVICE_TOKEN": self.SERVICE_TOKEN,
            "INPUT_PROJECT_ID": self.PROJECT_ID,
            "INPUT_DATABASE_NAME": self.DATABASE_NAME,
            "INPUT_REGION": self.REGION,
            "PROVIDER_API_URL": self.API_BASE_URL,
            "PROVIDER_TIMEOUT_SECONDS": self.TIMEOUT_SECONDS,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides the service token)."""
        masked = self.to_dict()
        masked["INPUT_SERVICE_TOKEN"] = "***" if self.SERVICE_TOKEN else None
        return masked
