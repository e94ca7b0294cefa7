"""
Provisioning orchestration components.

This module coordinates a single provisioning run: validate the request,
resolve the database name, reuse a matching database or create a new one,
and hand back the outputs.
"""

import logging
from typing import List, Optional

import httpx

from ..api import (
    create_connection_string,
    create_database,
    create_provider_client,
    list_databases,
)
from ..config import Env
from ..errors import ConfigError, ProvisionError
from ..models import DatabaseRecord, ProvisionOutcome, ProvisionRequest, ProvisionResult
from ..utils.logging import log_provision_event, log_provision_failure
from .naming import resolve_database_name

logger = logging.getLogger(__name__)


def validate_request(request: ProvisionRequest) -> None:
    """Reject requests lacking credentials before any network call."""
    if not request.service_token or not request.project_id:
        raise ConfigError("service_token and project_id are required")


def find_database(records: List[DatabaseRecord], name: str) -> Optional[DatabaseRecord]:
    """Return the first record whose name matches exactly."""
    for record in records:
        if record.name == name:
            return record
    return None


class ProvisioningOrchestrator:
    """
    Runs the list, then reuse-or-create sequence against the provider.

    Every call is awaited before the next decision; no state is shared
    between runs.
    """

    def __init__(self, client: httpx.Client):
        """
        Initialize provisioning orchestrator.

        Args:
            client: httpx client bound to the provider API
        """
        self.client = client

    def run(self, request: ProvisionRequest) -> ProvisionResult:
        validate_request(request)

        database_name = resolve_database_name(request.database_name_hint, request.ci_context)
        logger.info(f"Using database name: {database_name}")

        existing = find_database(
            list_databases(self.client, request.service_token, request.project_id),
            database_name,
        )

        if existing is not None:
            logger.info(f"Database {database_name} already exists with ID: {existing.id}")
            database_id = existing.id
            connection_url = create_connection_string(
                self.client, request.service_token, database_id
            )
            event = "database_reused"
        else:
            logger.info(f"Creating new database: {database_name}")
            created = create_database(
                self.client,
                request.service_token,
                request.project_id,
                database_name,
                request.region,
            )
            database_id = created.id
            connection_url = created.connection_string
            event = "database_created"

        log_provision_event(
            event,
            database_id=database_id,
            database_name=database_name,
            project_id=request.project_id,
            region=request.region,
        )
        return ProvisionResult(
            database_id=database_id,
            database_name=database_name,
            connection_url=connection_url,
        )


def provision(
    request: ProvisionRequest,
    client: Optional[httpx.Client] = None,
    env: Optional[Env] = None,
) -> ProvisionResult:
    """
    Provision or reuse the database described by ``request``.

    Args:
        request: Provisioning request
        client: Optional provider client; when omitted one is built from
            ``env`` (or the default configuration) and closed afterwards
        env: Configuration used to build the client

    Returns:
        ProvisionResult with id, sanitized name and connection URL

    Raises:
        ConfigError: If the service token or project id is missing
        ApiError: If the provider rejects a call
        NetworkError: If the provider cannot be reached
    """
    validate_request(request)

    if client is not None:
        return ProvisioningOrchestrator(client).run(request)

    with create_provider_client(env) as owned_client:
        return ProvisioningOrchestrator(owned_client).run(request)


def try_provision(
    request: ProvisionRequest,
    client: Optional[httpx.Client] = None,
    env: Optional[Env] = None,
) -> ProvisionOutcome:
    """Like provision(), but returns failures as a ProvisionOutcome instead of raising."""
    try:
        return ProvisionOutcome(result=provision(request, client=client, env=env))
    except ProvisionError as e:
        log_provision_failure(e, project_id=request.project_id)
        return ProvisionOutcome(error=e)
