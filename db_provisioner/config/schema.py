"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
Environment variable names follow the GitHub Actions ``INPUT_<NAME>``
convention so the tool can run directly as an action step.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    Required fields are validated separately by the orchestrator so a
    missing token is reported before any network call.
    """

    # Provider credentials
    service_token: Optional[str] = Field(
        None,
        description="Service token used as bearer credential for the provider API",
        json_schema_extra={
            "env_var": "INPUT_SERVICE_TOKEN",
            "cli_arg": "service_token",
            "sensitive": True,
        }
    )

    project_id: Optional[str] = Field(
        None,
        description="Provider project that owns the database",
        json_schema_extra={
            "env_var": "INPUT_PROJECT_ID",
            "cli_arg": "project_id",
        }
    )

    # Database options
    database_name: Optional[str] = Field(
        None,
        description="Explicit database name (derived from CI context when omitted)",
        json_schema_extra={
            "env_var": "INPUT_DATABASE_NAME",
            "cli_arg": "database_name",
        }
    )

    region: Optional[str] = Field(
        None,
        description="Provider region for newly created databases",
        json_schema_extra={
            "env_var": "INPUT_REGION",
            "cli_arg": "region",
        }
    )

    # Transport
    api_base_url: str = Field(
        DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL of the provider REST API",
        json_schema_extra={
            "env_var": "PROVIDER_API_URL",
            "cli_arg": "api_url",
        }
    )

    timeout_seconds: float = Field(
        DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Timeout per provider request in seconds",
        json_schema_extra={
            "env_var": "PROVIDER_TIMEOUT_SECONDS",
            "cli_arg": "timeout",
        }
    )

    @field_validator('api_base_url', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: Any) -> Any:
        """Normalize the base URL so paths can be appended safely."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
