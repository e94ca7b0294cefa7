"""
Output module.

This module hands provisioning results to downstream CI steps: outputs
are appended to the file named by GITHUB_OUTPUT, the connection URL is
masked in workflow logs, and failures are reported as workflow errors.
"""

import json
import logging
import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from ..models import ProvisionResult

logger = logging.getLogger(__name__)


def running_in_github_actions(environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("GITHUB_ACTIONS") == "true"


def _format_output(key: str, value: str) -> str:
    """Format one output entry, using a heredoc delimiter for multi-line values."""
    if "\n" not in value and "\r" not in value:
        return f"{key}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(
    result: ProvisionResult,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Publish the outputs of a successful run.

    Args:
        result: Provisioning result to publish
        environ: Environment mapping (defaults to os.environ)
        stream: Stream for workflow commands (defaults to sys.stdout)

    Returns:
        True if the outputs were written to a GITHUB_OUTPUT file
    """
    environ = os.environ if environ is None else environ
    stream = stream or sys.stdout

    if running_in_github_actions(environ) and result.connection_url:
        stream.write(f"::add-mask::{result.connection_url}\n")

    output_path = environ.get("GITHUB_OUTPUT")
    if not output_path:
        logger.debug("GITHUB_OUTPUT not set, skipping output file")
        return False

    try:
        with open(output_path, "a", encoding="utf-8") as f:
            for key, value in result.as_outputs().items():
                f.write(_format_output(key, value))
    except OSError as e:
        logger.error(f"Failed to write outputs to {output_path}: {e}")
        raise

    logger.info(f"Wrote {len(result.as_outputs())} outputs to {output_path}")
    return True


def render_outputs_json(result: ProvisionResult) -> str:
    """Render the outputs as a JSON document."""
    return json.dumps(result.as_outputs(), indent=2)


def report_failure(
    message: str,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Mark the workflow step as failed with ``message``."""
    logger.error(message)
    if running_in_github_actions(environ):
        stream = stream or sys.stdout
        # Workflow commands are single-line; escape as the runner expects
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        stream.write(f"::error::{escaped}\n")
