"""
Logging utilities for the database provisioner.

This module provides centralized logging configuration and structured
event logging for provisioning runs.
"""

import json
import logging
import time
from typing import Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("httpx").setLevel(logging.WARNING)  # Reduce HTTP client noise
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_provision_event(
    event: str,
    database_id: str,
    database_name: str,
    project_id: str,
    region: Optional[str] = None,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for a successful provisioning run.

    The connection URL and service token are never part of the record.

    Args:
        event: Event name (database_created, database_reused)
        database_id: Provider database identifier
        database_name: Sanitized database name
        project_id: Provider project identifier
        region: Region requested for creation, if any
        timestamp: Event timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    record = {
        "event_type": event,
        "timestamp": timestamp,
        "database_id": database_id,
        "database_name": database_name,
        "project_id": project_id,
        "region": region,
        "success": True,
    }

    logger.info(f"PROVISION: {json.dumps(record, ensure_ascii=False)}")


def log_provision_failure(
    error: Exception,
    project_id: Optional[str] = None,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for a failed provisioning run.

    Args:
        error: The error that aborted the run
        project_id: Provider project identifier, if known
        timestamp: Failure timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    kind = getattr(error, "kind", None)
    record = {
        "event_type": "provision_failure",
        "timestamp": timestamp,
        "project_id": project_id,
        "error_kind": kind.value if kind is not None else type(error).__name__,
        "status_code": getattr(error, "status_code", None),
        "error_message": str(error),
        "success": False,
    }

    logger.warning(f"PROVISION_FAILURE: {json.dumps(record, ensure_ascii=False)}")
