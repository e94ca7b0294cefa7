#!/usr/bin/env python3
"""
CI Context Models

This module contains the read-only view of the CI run that drives
database naming.
"""

from typing import Optional, NamedTuple


class CIContext(NamedTuple):
    """
    Information about the CI run requesting a database.

    Attributes:
        pull_request_number: Pull request number, when triggered by a pull request
        branch_name: Head branch of the pull request
        build_number: Sequential build/run number of the workflow
    """

    pull_request_number: Optional[int] = None
    branch_name: Optional[str] = None
    build_number: int = 0

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request_number is not None
