#!/usr/bin/env python3
"""
Provisioning Models

This module contains the request, result and outcome structures for a
single provisioning run.
"""

from typing import Dict, Optional, NamedTuple

from ..constants import OUTPUT_DATABASE_ID, OUTPUT_DATABASE_NAME, OUTPUT_DATABASE_URL
from ..errors import ErrorKind, ProvisionError
from .ci import CIContext


class ProvisionRequest(NamedTuple):
    """
    Everything needed to provision a database.

    Attributes:
        service_token: Bearer token for the provider API (secret)
        project_id: Provider project that owns the database
        database_name_hint: Optional explicit database name
        region: Optional provider region identifier
        ci_context: CI run information used to derive the name
    """

    service_token: str
    project_id: str
    database_name_hint: Optional[str] = None
    region: Optional[str] = None
    ci_context: CIContext = CIContext()

    def mask(self) -> dict:
        """Return a loggable view of the request with the token hidden."""
        return {
            "service_token": "***" if self.service_token else None,
            "project_id": self.project_id,
            "database_name_hint": self.database_name_hint,
            "region": self.region,
            "ci_context": self.ci_context._asdict(),
        }


class ProvisionResult(NamedTuple):
    """
    Final outputs of a successful provisioning run.

    Attributes:
        database_id: Provider identifier of the database
        database_name: Sanitized database name
        connection_url: Read-write connection string
    """

    database_id: str
    database_name: str
    connection_url: str

    def as_outputs(self) -> Dict[str, str]:
        """Map the result onto the output names consumed by CI steps."""
        return {
            OUTPUT_DATABASE_ID: self.database_id,
            OUTPUT_DATABASE_NAME: self.database_name,
            OUTPUT_DATABASE_URL: self.connection_url,
        }


class ProvisionOutcome(NamedTuple):
    """
    Result of a provisioning attempt that never raises.

    Exactly one of ``result`` and ``error`` is set.
    """

    result: Optional[ProvisionResult] = None
    error: Optional[ProvisionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None
