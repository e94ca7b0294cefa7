#!/usr/bin/env python3
"""
API package for the database provisioner.

This package provides the provider HTTP client and the operations used
to list databases, create databases and mint connection strings.
"""

from .client import (
    auth_headers,
    create_provider_client,
)

from .operations import (
    list_databases,
    create_database,
    create_connection_string,
)

__all__ = [
    # Client management
    "auth_headers",
    "create_provider_client",
    # Operations
    "list_databases",
    "create_database",
    "create_connection_string",
]
