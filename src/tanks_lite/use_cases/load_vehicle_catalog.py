"""Load vehicle catalog use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tanks_lite.domain.cancellation import CancellationToken
from tanks_lite.domain.errors import FetchCancelled
from tanks_lite.domain.vehicle import Vehicle
from tanks_lite.ports.vehicle_catalog_source import VehicleCatalogSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadVehicleCatalogResponse:
    """Sorted catalog produced by one load attempt."""

    vehicles: tuple[Vehicle, ...]
    sequence: int


class LoadVehicleCatalog:
    """
    Use case for loading the catalog, one attempt at a time.

    Responsibilities:
    - Give every attempt its own CancellationToken with an increasing sequence
    - Cancel the previous attempt as soon as a new one starts
    - Never hand back the outcome of a superseded attempt: its result (or
      failure) is replaced by FetchCancelled

    Callers can therefore apply whatever execute() returns or raises,
    except FetchCancelled, which must be ignored.
    """

    def __init__(self, vehicle_catalog_source: VehicleCatalogSource) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_catalog_source: Source the catalog is fetched from
        """
        self._source = vehicle_catalog_source
        self._sequence = 0
        self._current: CancellationToken | None = None

    @property
    def sequence(self) -> int:
        """Sequence number of the latest attempt (0 before the first one)."""
        return self._sequence

    def is_current(self, token: CancellationToken) -> bool:
        return token is self._current and not token.cancelled

    def cancel(self) -> None:
        """Cancel the in-flight attempt, if any."""
        if self._current is not None:
            self._current.cancel()

    def _begin(self) -> CancellationToken:
        self.cancel()
        self._sequence += 1
        self._current = CancellationToken(sequence=self._sequence)
        return self._current

    async def execute(self) -> LoadVehicleCatalogResponse:
        """
        Start a new attempt, superseding any attempt still in flight.

        Returns:
            LoadVehicleCatalogResponse with the sorted catalog

        Raises:
            FetchCancelled: If this attempt was cancelled or superseded
            NetworkError: If the transport failed (current attempt only)
            ApiError: If the API reported a failure (current attempt only)
        """
        token = self._begin()
        logger.info("Loading vehicle catalog", extra={"sequence": token.sequence})

        try:
            vehicles = await self._source.fetch_vehicles(token)
        except FetchCancelled:
            raise
        except Exception as exc:
            if not self.is_current(token):
                logger.debug(
                    "Dropping failure of superseded load",
                    extra={"sequence": token.sequence, "error_type": type(exc).__name__},
                )
                raise FetchCancelled(sequence=token.sequence) from exc
            raise

        if not self.is_current(token):
            logger.debug("Dropping result of superseded load", extra={"sequence": token.sequence})
            raise FetchCancelled(sequence=token.sequence)

        logger.info(
            "Vehicle catalog loaded",
            extra={"sequence": token.sequence, "vehicle_count": len(vehicles)},
        )
        return LoadVehicleCatalogResponse(vehicles=tuple(vehicles), sequence=token.sequence)
