from __future__ import annotations

from tanks_lite.domain.paging import Pagination
from tanks_lite.domain.vehicle import Vehicle
from tanks_lite.entrypoints.table.dtos.vehicle_table import VehicleRowDTO, VehicleTableViewDTO
from tanks_lite.use_cases.search_vehicle_catalog import SearchVehicleCatalogResponse


class VehicleTableMapper:
    """Maps domain search results to the table view DTOs."""

    @staticmethod
    def to_row(vehicle: Vehicle) -> VehicleRowDTO:
        """
        Converts a domain Vehicle to a table row.

        Args:
            vehicle: Domain Vehicle entity

        Returns:
            VehicleRowDTO: Row with the https icon URL and status badge flag
        """
        return VehicleRowDTO(
            id=vehicle.vehicle_id,
            name=vehicle.name,
            short_name=vehicle.short_name,
            tier=vehicle.tier,
            type=vehicle.vehicle_type,  # Domain uses 'vehicle_type', DTO uses 'type'
            nation=vehicle.nation,
            is_special=vehicle.is_special,
            icon_url=vehicle.secure_icon_url,
        )

    @staticmethod
    def to_view(
        result: SearchVehicleCatalogResponse,
        pagination: Pagination,
        *,
        query: str,
        is_loading: bool,
        error_message: str | None,
    ) -> VehicleTableViewDTO:
        """
        Converts a search result plus component state to the view snapshot.

        Rows are hidden while an error is shown or a load is running.

        Args:
            result: Search result for the current query and page
            pagination: Reconciled page state (size, options, navigation flags)
            query: Current search text (echoed back)
            is_loading: Whether a load attempt is in flight
            error_message: User-facing error, if the last load failed

        Returns:
            VehicleTableViewDTO: Render-ready snapshot
        """
        show_rows = error_message is None and not is_loading

        return VehicleTableViewDTO(
            vehicles=[VehicleTableMapper.to_row(v) for v in result.vehicles] if show_rows else [],
            total_count=result.total_count,
            filtered_count=result.filtered_count,
            query=query,
            page=pagination.page,
            total_pages=pagination.total_pages,
            page_size=pagination.page_size,
            page_size_options=list(pagination.options),
            has_previous=pagination.has_previous,
            has_next=pagination.has_next,
            is_loading=is_loading,
            error_message=error_message,
            is_empty=show_rows and result.filtered_count == 0,
        )
