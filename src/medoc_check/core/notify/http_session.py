"""HTTP session utilities for notification delivery."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from medoc_check.config.settings import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = global_config["network"]["timeout_seconds"]

    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds * 3,
        sock_read=timeout_seconds,
        sock_connect=timeout_seconds,
    )

    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session
