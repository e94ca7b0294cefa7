"""
Utilities module for the database provisioner.

This module provides shared logging helpers used across the application.
"""

from .logging import setup_logging, log_provision_event, log_provision_failure

__all__ = [
    "setup_logging",
    "log_provision_event",
    "log_provision_failure",
]
