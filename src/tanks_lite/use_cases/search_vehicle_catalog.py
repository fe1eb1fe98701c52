from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tanks_lite.domain.paging import count_pages
from tanks_lite.domain.text import normalize_text
from tanks_lite.domain.vehicle import Vehicle


def filter_vehicles(vehicles: Sequence[Vehicle], query: str) -> list[Vehicle]:
    """
    Keep vehicles whose name or short name contains the query.

    Matching is a substring test on normalized text (case and Latin
    diacritics ignored). An empty or whitespace-only query keeps everything.
    Input order is preserved.
    """
    needle = normalize_text(query).strip()
    if not needle:
        return list(vehicles)

    return [
        vehicle
        for vehicle in vehicles
        if needle in normalize_text(vehicle.name) or needle in normalize_text(vehicle.short_name)
    ]


def slice_page(vehicles: Sequence[Vehicle], page: int, page_size: int) -> list[Vehicle]:
    """
    Return the vehicles shown on a 1-based page.

    Pages past the end (or before the start) yield an empty list.
    """
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(vehicles[start : start + page_size])


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogRequest:
    vehicles: Sequence[Vehicle]  # Sorted catalog
    query: str
    page: int
    page_size: int


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogResponse:
    vehicles: list[Vehicle]  # Page slice
    filtered_count: int  # Matching vehicles before paging
    total_count: int  # Vehicles in the catalog
    page: int
    total_pages: int


class SearchVehicleCatalog:
    """
    Client-side search over an already sorted catalog.

    Filters by query, then slices the requested page. Pure and
    deterministic: repeated calls with the same request give the same
    response. The page is used as given; clamping it is the job of
    Pagination.reconcile().
    """

    def execute(self, request: SearchVehicleCatalogRequest) -> SearchVehicleCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Sorted catalog, query and paging

        Returns:
            Response with the page slice and counts
        """
        matches = filter_vehicles(request.vehicles, request.query)

        return SearchVehicleCatalogResponse(
            vehicles=slice_page(matches, request.page, request.page_size),
            filtered_count=len(matches),
            total_count=len(request.vehicles),
            page=request.page,
            total_pages=count_pages(len(matches), request.page_size),
        )
