"""
Database naming utilities.

Turns human-readable hints and CI context into provider-safe database
names made only of lowercase letters, digits and underscores.
"""

from __future__ import annotations

import re
from typing import Optional

from ..models import CIContext


_SEPARATORS = re.compile(r"[/\-\s]")
_DISALLOWED = re.compile(r"[^a-z0-9_]")


def sanitize_database_name(raw: str) -> str:
    """
    Sanitize an arbitrary string into a database name.

    Rules:
    - Replace every ``/``, ``-`` and whitespace character with ``_``.
    - Lowercase the result.
    - Drop every character outside ``[a-z0-9_]``.
    - Be idempotent: applying multiple times yields the same result.
    """
    if not raw:
        return ""
    name = _SEPARATORS.sub("_", raw).lower()
    return _DISALLOWED.sub("", name)


def resolve_database_name(hint: Optional[str], ci_context: CIContext) -> str:
    """Pick the database name: explicit hint, then pull request, then build number."""
    if hint:
        return sanitize_database_name(hint)
    if ci_context.is_pull_request:
        return sanitize_database_name(
            f"pr-{ci_context.pull_request_number}-{ci_context.branch_name or ''}"
        )
    return sanitize_database_name(f"test-{ci_context.build_number}")
