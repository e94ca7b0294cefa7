#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the database provisioner.
"""

from .ci import CIContext
from .database import DatabaseRecord
from .provision import ProvisionRequest, ProvisionResult, ProvisionOutcome

__all__ = [
    "CIContext",
    "DatabaseRecord",
    "ProvisionRequest",
    "ProvisionResult",
    "ProvisionOutcome",
]
