"""
Provider API client management module.

This module builds the httpx client used for all provider calls so
timeouts, base URL and common headers are configured in one place.
"""

import logging
from typing import Dict, Optional

import httpx

from ..config import Env

logger = logging.getLogger(__name__)


def auth_headers(service_token: str) -> Dict[str, str]:
    """Headers carried by every provider request."""
    return {
        "Authorization": f"Bearer {service_token}",
        "Content-Type": "application/json",
    }


def create_provider_client(
    env: Optional[Env] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create an httpx client bound to the provider API.

    Args:
        env: Configuration to use (defaults to the schema defaults)
        transport: Optional transport, used by tests to fake the provider

    Returns:
        Configured httpx.Client; callers are responsible for closing it
    """
    env = env or Env()

    client = httpx.Client(
        base_url=env.API_BASE_URL,
        timeout=httpx.Timeout(env.TIMEOUT_SECONDS),
        transport=transport,
    )
    logger.debug(f"Provider client initialized for {env.API_BASE_URL}")
    return client
