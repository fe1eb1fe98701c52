"""Stateful vehicle table component.

Owns the sorted catalog and the view state (query, page, page size) and
recomputes the page view from them on every change.
"""

from __future__ import annotations

import logging
from typing import Iterable

from tanks_lite.domain.errors import CatalogFetchError, FetchCancelled
from tanks_lite.domain.paging import Pagination
from tanks_lite.domain.vehicle import Vehicle
from tanks_lite.entrypoints.table.dtos.vehicle_table import VehicleTableViewDTO
from tanks_lite.entrypoints.table.mappers.vehicle_table_mapper import VehicleTableMapper
from tanks_lite.ports.vehicle_catalog_source import VehicleCatalogSource
from tanks_lite.use_cases.load_vehicle_catalog import LoadVehicleCatalog
from tanks_lite.use_cases.search_vehicle_catalog import (
    SearchVehicleCatalog,
    SearchVehicleCatalogRequest,
    SearchVehicleCatalogResponse,
    filter_vehicles,
)

logger = logging.getLogger(__name__)

GENERIC_LOAD_ERROR = "Failed to load the vehicle list"


class VehicleTable:
    """
    Vehicle table: load, search and paginate the catalog.

    A new table counts as loading until its first load() completes.
    Only the latest load attempt can change state: starting a new one
    (load() or retry()) cancels the previous attempt, whose result is
    then ignored.

    Failures of the current attempt become error_message; the previously
    loaded catalog is kept but not shown while the error is set.
    """

    def __init__(
        self,
        vehicle_catalog_source: VehicleCatalogSource,
        page_size_options: Iterable[int] | None = None,
        initial_page_size: int | None = None,
    ) -> None:
        """
        Initialize the table.

        Args:
            vehicle_catalog_source: Where the catalog is fetched from
            page_size_options: Allowed page sizes (malformed values fall back
                               to the defaults)
            initial_page_size: Starting page size (ignored unless it is one
                               of the options)
        """
        self._loader = LoadVehicleCatalog(vehicle_catalog_source)
        self._search = SearchVehicleCatalog()
        self._pagination = Pagination(page_size_options, initial_page_size)
        self._vehicles: tuple[Vehicle, ...] = ()
        self._query = ""
        self._is_loading = True
        self._error_message: str | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        """Full catalog in canonical order."""
        return self._vehicles

    @property
    def query(self) -> str:
        return self._query

    @property
    def page(self) -> int:
        return self._pagination.page

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def page_size_options(self) -> tuple[int, ...]:
        return self._pagination.options

    @property
    def total_pages(self) -> int:
        return self._pagination.total_pages

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        return self._error_message

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """
        Load the catalog, superseding any load still in flight.

        Never raises for fetch failures: they end up in error_message.
        A cancelled or superseded attempt leaves the state untouched.
        """
        self._is_loading = True
        self._error_message = None

        try:
            response = await self._loader.execute()
        except FetchCancelled:
            logger.debug("Catalog load cancelled")
            return
        except CatalogFetchError as exc:
            logger.warning("Catalog load failed", extra={"error": exc.to_dict()})
            self._error_message = exc.message
        except Exception as exc:
            logger.error(
                "Unexpected error while loading catalog",
                exc_info=exc,
                extra={"error_type": type(exc).__name__},
            )
            self._error_message = GENERIC_LOAD_ERROR
        else:
            self._vehicles = response.vehicles
            self._reconcile()

        self._is_loading = False

    async def retry(self) -> None:
        """Re-run the load after a failure (user-initiated, no backoff)."""
        await self.load()

    def close(self) -> None:
        """Cancel any in-flight load (the table is going away)."""
        self._loader.cancel()

    # ------------------------------------------------------------------
    # User interaction
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        """Change the search text and go back to the first page."""
        self._query = query
        self._pagination.reset()
        self._reconcile()

    def set_page_size(self, page_size: int) -> None:
        """Switch page size (ignored unless it is a configured option)."""
        self._pagination.set_page_size(page_size)

    def set_page_size_options(self, page_size_options: Iterable[int] | None) -> None:
        """Replace the configured page sizes (external configuration change)."""
        self._pagination.set_options(page_size_options)
        self._reconcile()

    def next_page(self) -> None:
        self._pagination.next_page()

    def prev_page(self) -> None:
        self._pagination.prev_page()

    def first_page(self) -> None:
        self._pagination.first_page()

    def last_page(self) -> None:
        self._pagination.last_page()

    def go_to_page(self, page: int) -> None:
        self._pagination.go_to_page(page)

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def _reconcile(self) -> None:
        filtered_count = len(filter_vehicles(self._vehicles, self._query))
        self._pagination.reconcile(filtered_count)

    def search(self) -> SearchVehicleCatalogResponse:
        """Current page of the filtered catalog."""
        return self._search.execute(
            SearchVehicleCatalogRequest(
                vehicles=self._vehicles,
                query=self._query,
                page=self._pagination.page,
                page_size=self._pagination.page_size,
            )
        )

    def view(self) -> VehicleTableViewDTO:
        """Render-ready snapshot of the table."""
        return VehicleTableMapper.to_view(
            self.search(),
            self._pagination,
            query=self._query,
            is_loading=self._is_loading,
            error_message=self._error_message,
        )
