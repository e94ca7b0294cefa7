#!/usr/bin/env python3
"""
Database Provisioner Package

A Python package that provisions (or reuses) a hosted Postgres database
through the provider's REST API, naming it from CI context and exposing
its id, name and connection URL to downstream CI steps.

This package provides both a command-line interface and a programmatic API.
"""

__version__ = "1.0.0"
__author__ = "Database Provisioner"
__description__ = "Provision per-pull-request Postgres databases for CI runs"
__license__ = "MIT"
__status__ = "Production"

# Import models for public API
from .models import (
    CIContext,
    DatabaseRecord,
    ProvisionRequest,
    ProvisionResult,
    ProvisionOutcome,
)

# Import errors for public API
from .errors import (
    ErrorKind,
    ProvisionError,
    ConfigError,
    ApiError,
    NetworkError,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_API_BASE_URL,
)

# Import core functionality for public API
from .core import (
    sanitize_database_name,
    resolve_database_name,
    load_ci_context,
    provision,
    try_provision,
    write_outputs,
)

# Import API functions for public API
from .api import (
    create_provider_client,
    list_databases,
    create_database,
    create_connection_string,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "CIContext",
    "DatabaseRecord",
    "ProvisionRequest",
    "ProvisionResult",
    "ProvisionOutcome",
    # Errors
    "ErrorKind",
    "ProvisionError",
    "ConfigError",
    "ApiError",
    "NetworkError",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_CONFIG_ERROR",
    "EXIT_API_FAILURES",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_API_BASE_URL",
    # Core functionality
    "sanitize_database_name",
    "resolve_database_name",
    "load_ci_context",
    "provision",
    "try_provision",
    "write_outputs",
    # API functions
    "create_provider_client",
    "list_databases",
    "create_database",
    "create_connection_string",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
