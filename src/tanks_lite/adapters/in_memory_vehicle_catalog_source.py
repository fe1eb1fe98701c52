from __future__ import annotations

from typing import Callable

from tanks_lite.domain.cancellation import CancellationToken
from tanks_lite.domain.ordering import sort_vehicles
from tanks_lite.domain.vehicle import Vehicle
from tanks_lite.ports.vehicle_catalog_source import VehicleCatalogSource

ErrorFactory = Callable[[], Exception]


class InMemoryVehicleCatalogSource(VehicleCatalogSource):
    """
    Canonical contract implementation for tests.

    - Returns the configured vehicles in canonical order
    - Raises a new error from the configured factory instead, if one is set
    - Honors the cancel token before and after "fetching"
    - Counts calls so tests can assert on retries
    """

    def __init__(
        self, vehicles: list[Vehicle], error_factory: ErrorFactory | None = None
    ) -> None:
        self._vehicles = list(vehicles)
        self._error_factory = error_factory
        self.calls = 0

    def set_vehicles(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = list(vehicles)
        self._error_factory = None

    def set_error_factory(self, error_factory: ErrorFactory | None) -> None:
        self._error_factory = error_factory

    async def fetch_vehicles(
        self, cancel_token: CancellationToken | None = None
    ) -> list[Vehicle]:
        self.calls += 1
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        if self._error_factory is not None:
            raise self._error_factory()

        vehicles = sort_vehicles(self._vehicles)

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()
        return vehicles
