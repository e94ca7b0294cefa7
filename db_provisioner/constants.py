#!/usr/bin/env python3
"""
Application Constants

This module contains provider endpoints, request defaults and exit codes
used throughout the database provisioner.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 3
EXIT_API_FAILURES = 4
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Provider API
DEFAULT_API_BASE_URL = "https://api.prisma.io"
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
PRODUCT_USER_AGENT = "prisma-postgres-github-action"
DEFAULT_CONNECTION_LABEL = "read_write_key"

# Output keys consumed by downstream CI steps
OUTPUT_DATABASE_ID = "database_id"
OUTPUT_DATABASE_NAME = "database_name"
OUTPUT_DATABASE_URL = "database_url"
