from __future__ import annotations

from abc import ABC, abstractmethod

from tanks_lite.domain.cancellation import CancellationToken
from tanks_lite.domain.vehicle import Vehicle


class VehicleCatalogSource(ABC):
    """
    Port for loading the vehicle catalog.

    Implementations fetch the full catalog and hand it back already sorted
    by the canonical ordering (see tanks_lite.domain.ordering), so every
    caller sees the same order.

    Contract:
        - Returns a new list on every call (no caching)
        - Raises NetworkError / ApiError for failures the user should see
        - Raises FetchCancelled if cancel_token is cancelled before completion
    """

    @abstractmethod
    async def fetch_vehicles(
        self, cancel_token: CancellationToken | None = None
    ) -> list[Vehicle]:
        """
        Fetch every vehicle in the catalog.

        Args:
            cancel_token: Optional token; cancelling it aborts the fetch

        Returns:
            Vehicles in canonical order

        Raises:
            NetworkError: Transport failure or non-success status code
            ApiError: Payload reported a failure or could not be validated
            FetchCancelled: The token was cancelled before completion
        """
        ...
