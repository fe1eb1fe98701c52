"""Encyclopedia API implementation of VehicleCatalogSource."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable

import httpx

from tanks_lite.adapters.mappers.vehicles_payload_mapper import VehiclesPayloadMapper
from tanks_lite.domain.cancellation import CancellationToken
from tanks_lite.domain.errors import ApiError, FetchCancelled, NetworkError
from tanks_lite.domain.ordering import sort_vehicles
from tanks_lite.domain.vehicle import Vehicle
from tanks_lite.infra.api.client import get_http_client
from tanks_lite.infra.api.config import CatalogApiConfig, catalog_api_config
from tanks_lite.ports.vehicle_catalog_source import VehicleCatalogSource

logger = logging.getLogger(__name__)


class HttpVehicleCatalogSource(VehicleCatalogSource):
    """
    Fetches the catalog from the encyclopedia `vehicles` endpoint.

    - One GET per call, no caching
    - Non-2xx status → NetworkError(status_code)
    - Payload status other than "ok" → ApiError(payload message)
    - Cancelling the token aborts the in-flight request → FetchCancelled
    - Result is sorted by the canonical ordering
    """

    def __init__(
        self,
        config: CatalogApiConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the source.

        Args:
            config: API configuration (defaults to catalog_api_config())
            client: Optional shared client; when omitted, a client is
                    created and closed for every fetch
        """
        self._config = config or catalog_api_config()
        self._client = client

    async def fetch_vehicles(
        self, cancel_token: CancellationToken | None = None
    ) -> list[Vehicle]:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        if self._client is not None:
            response = await self._get(self._client, cancel_token)
        else:
            async with get_http_client(self._config) as client:
                response = await self._get(client, cancel_token)

        # A late cancel still wins over a completed response
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        if not response.is_success:
            raise NetworkError(status_code=response.status_code)

        try:
            raw = response.json()
        except ValueError as exc:
            logger.warning(
                "Catalog response is not valid JSON",
                extra={"status_code": response.status_code},
            )
            raise ApiError() from exc

        payload = VehiclesPayloadMapper.to_payload(raw)
        vehicles = VehiclesPayloadMapper.to_vehicles(payload)

        return sort_vehicles(vehicles)

    async def _get(
        self,
        client: httpx.AsyncClient,
        cancel_token: CancellationToken | None,
    ) -> httpx.Response:
        """
        Send the catalog request, racing it against the cancel token.

        Raises:
            NetworkError: If the transport fails (connection, timeout)
            FetchCancelled: If the token is cancelled first
        """
        request = client.get(self._config.api_url, params=self._config.query_params())

        try:
            if cancel_token is None:
                return await request
            return await self._race(request, cancel_token)
        except httpx.TransportError as exc:
            logger.warning(
                "Catalog request failed",
                extra={"error_type": type(exc).__name__, "url": self._config.api_url},
            )
            raise NetworkError() from exc

    @staticmethod
    async def _race(
        request: Awaitable[httpx.Response], cancel_token: CancellationToken
    ) -> httpx.Response:
        request_task = asyncio.ensure_future(request)
        cancel_waiter = asyncio.ensure_future(cancel_token.wait())

        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_waiter},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            request_task.cancel()
            raise
        finally:
            cancel_waiter.cancel()

        if request_task in done and not cancel_token.cancelled:
            return request_task.result()

        request_task.cancel()
        # Let the aborted request unwind before reporting cancellation
        await asyncio.gather(request_task, return_exceptions=True)
        raise FetchCancelled(sequence=cancel_token.sequence)
