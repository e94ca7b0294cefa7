#!/usr/bin/env python3
"""
CLI package for the database provisioner.

This package provides command-line interface components including
argument parsing and the main application flow.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
    run,
)

__all__ = [
    # Argument parsing
    "create_argument_parser",
    # Main application flow
    "main",
    "run",
]
