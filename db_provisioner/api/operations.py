"""
API operations module.

This module holds the three provider calls used during provisioning.
Each call is a single request/response cycle: non-success statuses raise
ApiError and transport failures raise NetworkError. Nothing is retried.
"""

import logging
from typing import Any, List, Optional, Tuple

import httpx

from ..constants import DEFAULT_CONNECTION_LABEL, PRODUCT_USER_AGENT
from ..errors import ApiError, NetworkError
from ..models import DatabaseRecord
from .client import auth_headers

logger = logging.getLogger(__name__)


def _send(
    client: httpx.Client,
    action: str,
    method: str,
    path: str,
    headers: dict,
    payload: Optional[dict] = None,
) -> Tuple[int, Any]:
    """Perform one request and return the status code and the ``data`` member of the body."""
    logger.debug(f"{method} {path}")
    try:
        response = client.request(method, path, headers=headers, json=payload)
    except httpx.TransportError as e:
        raise NetworkError(str(e) or type(e).__name__) from e

    if not response.is_success:
        raise ApiError(
            action=action,
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )

    try:
        body = response.json()
    except ValueError as e:
        raise ApiError(
            action=action,
            status_code=response.status_code,
            reason="malformed JSON response",
            body=response.text,
        ) from e

    if not isinstance(body, dict):
        raise ApiError(
            action=action,
            status_code=response.status_code,
            reason="unexpected response shape",
            body=response.text,
        )
    return response.status_code, body.get("data")


def _require(status_code: int, data: Any, key: str, action: str) -> Any:
    if not isinstance(data, dict) or not data.get(key):
        raise ApiError(
            action=action,
            status_code=status_code,
            reason=f"response missing '{key}'",
            body=str(data),
        )
    return data[key]


def list_databases(
    client: httpx.Client,
    service_token: str,
    project_id: str,
) -> List[DatabaseRecord]:
    """
    List the databases of a project.

    Returns:
        Records for every database reported by the provider; an absent
        ``data`` member means the project has none.
    """
    action = "fetch databases"
    status_code, data = _send(
        client,
        action,
        "GET",
        f"/v1/projects/{project_id}/databases",
        headers=auth_headers(service_token),
    )
    if data is not None and not isinstance(data, list):
        raise ApiError(
            action=action,
            status_code=status_code,
            reason="unexpected response shape",
            body=str(data),
        )

    records = []
    for item in data or []:
        if not isinstance(item, dict) or "id" not in item:
            continue
        records.append(DatabaseRecord(id=str(item["id"]), name=item.get("name") or ""))
    logger.debug(f"Project {project_id} has {len(records)} database(s)")
    return records


def create_database(
    client: httpx.Client,
    service_token: str,
    project_id: str,
    name: str,
    region: Optional[str] = None,
) -> DatabaseRecord:
    """
    Create a database and return it with its initial connection string.
    """
    action = "create database"
    headers = auth_headers(service_token)
    headers["User-Agent"] = PRODUCT_USER_AGENT

    payload = {"name": name}
    if region:
        payload["region"] = region

    status_code, data = _send(
        client,
        action,
        "POST",
        f"/v1/projects/{project_id}/databases",
        headers=headers,
        payload=payload,
    )

    return DatabaseRecord(
        id=str(_require(status_code, data, "id", action)),
        name=name,
        connection_string=_require(status_code, data, "connectionString", action),
    )


def create_connection_string(
    client: httpx.Client,
    service_token: str,
    database_id: str,
    label: str = DEFAULT_CONNECTION_LABEL,
) -> str:
    """Mint a new connection string for an existing database."""
    action = "create connection string"
    status_code, data = _send(
        client,
        action,
        "POST",
        f"/v1/databases/{database_id}/connections",
        headers=auth_headers(service_token),
        payload={"name": label},
    )
    return _require(status_code, data, "connectionString", action)
