#!/usr/bin/env python3
"""
Core package for the database provisioner.

This package provides naming, CI context loading, provisioning
orchestration and output publishing.
"""

from .naming import (
    sanitize_database_name,
    resolve_database_name,
)

from .ci_context import (
    load_ci_context,
)

from .orchestrator import (
    ProvisioningOrchestrator,
    provision,
    try_provision,
)

from .outputs import (
    write_outputs,
    render_outputs_json,
    report_failure,
)

__all__ = [
    # Naming
    "sanitize_database_name",
    "resolve_database_name",
    # CI context
    "load_ci_context",
    # Orchestration
    "ProvisioningOrchestrator",
    "provision",
    "try_provision",
    # Outputs
    "write_outputs",
    "render_outputs_json",
    "report_failure",
]
