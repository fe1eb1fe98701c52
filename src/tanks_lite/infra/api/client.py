from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from tanks_lite.infra.api.config import CatalogApiConfig


def build_http_client(config: CatalogApiConfig) -> httpx.AsyncClient:
    """
    Create an AsyncClient for the catalog API.

    The caller owns the client and must close it (aclose()).
    """
    return httpx.AsyncClient(
        timeout=config.timeout_seconds,
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


@asynccontextmanager
async def get_http_client(config: CatalogApiConfig) -> AsyncIterator[httpx.AsyncClient]:
    """Get an HTTP client that is closed when the block exits."""
    client = build_http_client(config)

    try:
        yield client
    finally:
        await client.aclose()
