#!/usr/bin/env python3
"""
Database Models

This module contains data structures describing databases as reported
by the hosting provider.
"""

from typing import Optional, NamedTuple


class DatabaseRecord(NamedTuple):
    """
    A database owned by the provider.

    Attributes:
        id: Provider-assigned database identifier
        name: Database name
        connection_string: Connection string, only present right after creation
    """

    id: str
    name: str
    connection_string: Optional[str] = None
