from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from tanks_lite.adapters.dtos.vehicles_payload import VehicleDTO, VehiclesPayloadDTO
from tanks_lite.domain.errors import ApiError
from tanks_lite.domain.vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehiclesPayloadMapper:
    """Maps the encyclopedia API payload to domain vehicles."""

    @staticmethod
    def to_payload(raw: Any) -> VehiclesPayloadDTO:
        """
        Validates the decoded JSON body.

        Args:
            raw: Decoded JSON body

        Returns:
            VehiclesPayloadDTO: Validated envelope (vehicles not yet validated)

        Raises:
            ApiError: If the body is not a catalog payload
        """
        try:
            return VehiclesPayloadDTO.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Catalog payload failed validation",
                extra={"errors": exc.errors(include_url=False)},
            )
            raise ApiError() from exc

    @staticmethod
    def to_vehicle(dto: VehicleDTO) -> Vehicle:
        """
        Converts an API vehicle to the domain entity.

        API names differ from domain names: `tank_id` → `vehicle_id`,
        `type` → `vehicle_type`, `images.small_icon` → `small_icon_url`.
        """
        return Vehicle(
            vehicle_id=dto.tank_id,
            name=dto.name,
            short_name=dto.short_name,
            tier=dto.tier,
            vehicle_type=dto.type,
            nation=dto.nation,
            is_premium=dto.is_premium,
            is_gift=dto.is_gift,
            small_icon_url=dto.images.small_icon,
        )

    @staticmethod
    def to_vehicles(payload: VehiclesPayloadDTO) -> list[Vehicle]:
        """
        Extracts vehicles from a validated payload, in payload order.

        Raises:
            ApiError: If the payload status is not "ok" or a vehicle is malformed
        """
        if not payload.is_ok:
            error = payload.error
            raise ApiError(
                message=error.message if error else None,
                api_code=str(error.code) if error and error.code is not None else None,
            )

        vehicles: list[Vehicle] = []
        for key, item in (payload.data or {}).items():
            if item is None:
                # The API answers null for ids it does not know
                continue
            try:
                dto = VehicleDTO.model_validate(item)
            except ValidationError as exc:
                logger.warning(
                    "Vehicle failed validation",
                    extra={"key": key, "errors": exc.errors(include_url=False)},
                )
                raise ApiError() from exc
            vehicles.append(VehiclesPayloadMapper.to_vehicle(dto))

        return vehicles
