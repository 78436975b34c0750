"""Backend connection factory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from opensearchpy import AsyncOpenSearch

if TYPE_CHECKING:
    from elasticscout.config.settings import ConnectionSettings

logger = logging.getLogger(__name__)


def create_client(settings: ConnectionSettings) -> AsyncOpenSearch:
    """Create an ``AsyncOpenSearch`` client from connection settings.

    No request is made; the first round-trip happens on first use.

    Args:
        settings: Connection configuration.

    Returns:
        A client suitable for sharing across concurrent callers.
    """
    client_kwargs: dict[str, Any] = {
        "hosts": settings.hosts,
        "verify_certs": settings.verify_certs,
        "ssl_show_warn": False,
        "timeout": settings.timeout,
    }
    if settings.username and settings.password:
        client_kwargs["http_auth"] = (settings.username, settings.password)
    if settings.api_key:
        client_kwargs["headers"] = {"Authorization": f"ApiKey {settings.api_key}"}

    client_kwargs.update(settings.extra)

    logger.debug("Creating search client for hosts %s", settings.hosts)
    return AsyncOpenSearch(**client_kwargs)
