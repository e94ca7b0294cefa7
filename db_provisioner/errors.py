"""
Error types for the database provisioner.

Every failure that aborts a provisioning run is a ProvisionError tagged
with an ErrorKind, so callers can either catch exceptions or inspect the
kind carried by a ProvisionOutcome.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of provisioning failures."""

    CONFIG = "config"
    API = "api"
    NETWORK = "network"


class ProvisionError(Exception):
    """Base class for failures that abort a provisioning run."""

    kind: ErrorKind = ErrorKind.API


class ConfigError(ProvisionError):
    """Raised when required configuration is missing or invalid."""

    kind = ErrorKind.CONFIG


class ApiError(ProvisionError):
    """
    Raised when the provider answers with a non-success HTTP status.

    Attributes:
        action: Human readable description of the failed call
        status_code: HTTP status code returned by the provider
        reason: HTTP reason phrase
        body: Raw response body text
    """

    kind = ErrorKind.API

    def __init__(
        self,
        action: str,
        status_code: int,
        reason: str = "",
        body: Optional[str] = None,
    ):
        self.action = action
        self.status_code = status_code
        self.reason = reason
        self.body = body

        message = f"Failed to {action}: {status_code} {reason}".rstrip()
        if body:
            message = f"{message} - {body}"
        super().__init__(message)


class NetworkError(ProvisionError):
    """Raised when the provider cannot be reached at the transport level."""

    kind = ErrorKind.NETWORK
