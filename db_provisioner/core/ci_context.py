"""
CI context loading.

Reads the pull request number, head branch and run number from the
GitHub Actions environment, with explicit values taking precedence.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from ..models import CIContext

logger = logging.getLogger(__name__)


def _read_event_payload(event_path: Optional[str]) -> Mapping[str, Any]:
    """Load the webhook payload GitHub writes to GITHUB_EVENT_PATH."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.is_file():
        logger.debug(f"Event payload not found: {event_path}")
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Unable to read event payload {event_path}: {e}")
        return {}
    return payload if isinstance(payload, dict) else {}


def _parse_int(value: Any, label: str, default: Optional[int] = 0) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric {label}: {value!r}")
        return default


def load_ci_context(
    environ: Optional[Mapping[str, str]] = None,
    pull_request_number: Optional[int] = None,
    branch_name: Optional[str] = None,
    build_number: Optional[int] = None,
) -> CIContext:
    """
    Build the CI context for this run.

    Args:
        environ: Environment mapping (defaults to os.environ)
        pull_request_number: Explicit pull request number
        branch_name: Explicit pull request head branch
        build_number: Explicit build number

    Returns:
        CIContext combining explicit values with GITHUB_EVENT_PATH and
        GITHUB_RUN_NUMBER
    """
    environ = os.environ if environ is None else environ

    payload = _read_event_payload(environ.get("GITHUB_EVENT_PATH"))
    pull_request = payload.get("pull_request") or {}

    if pull_request_number is None:
        pull_request_number = _parse_int(
            pull_request.get("number"), "pull request number", default=None
        )
    if branch_name is None:
        branch_name = (pull_request.get("head") or {}).get("ref")
    if build_number is None:
        build_number = _parse_int(environ.get("GITHUB_RUN_NUMBER"), "run number")

    context = CIContext(
        pull_request_number=pull_request_number,
        branch_name=branch_name,
        build_number=build_number,
    )
    logger.debug(f"CI context: {context._asdict()}")
    return context
