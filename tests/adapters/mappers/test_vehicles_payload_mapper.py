"""
Test suite for VehiclesPayloadMapper.

- Validates the payload envelope (anything but a dict with "status" is rejected)
- Translates API field names to domain names
- Turns error payloads into ApiError
"""

from __future__ import annotations

import pytest

from tanks_lite.adapters.dtos.vehicles_payload import (
    ApiErrorDTO,
    VehicleDTO,
    VehicleImagesDTO,
    VehiclesPayloadDTO,
)
from tanks_lite.adapters.mappers.vehicles_payload_mapper import VehiclesPayloadMapper
from tanks_lite.domain.errors import ApiError
from tanks_lite.domain.vehicle import Vehicle


# ==============================================================================
# to_payload()
# ==============================================================================


def test_to_payload_accepts_ok_envelope() -> None:
    payload = VehiclesPayloadMapper.to_payload({"status": "ok", "data": {}, "meta": {"count": 0}})

    assert payload.is_ok
    assert payload.data == {}


@pytest.mark.parametrize("raw", [None, [], "ok", {"data": {}}])
def test_to_payload_rejects_non_payloads(raw: object) -> None:
    with pytest.raises(ApiError, match=ApiError.DEFAULT_MESSAGE):
        VehiclesPayloadMapper.to_payload(raw)


# ==============================================================================
# to_vehicle()
# ==============================================================================


def test_to_vehicle_renames_fields() -> None:
    dto = VehicleDTO(
        tank_id=1,
        name="Löwe",
        short_name="Lowe",
        tier=8,
        type="heavyTank",
        nation="germany",
        is_premium=True,
        is_gift=False,
        images=VehicleImagesDTO(small_icon="http://example.com/lowe.png"),
    )

    assert VehiclesPayloadMapper.to_vehicle(dto) == Vehicle(
        vehicle_id=1,
        name="Löwe",
        short_name="Lowe",
        tier=8,
        vehicle_type="heavyTank",
        nation="germany",
        is_premium=True,
        is_gift=False,
        small_icon_url="http://example.com/lowe.png",
    )


def test_to_vehicle_defaults_missing_optional_fields() -> None:
    vehicle = VehiclesPayloadMapper.to_vehicle(VehicleDTO(tank_id=5, name="Т-34", tier=5))

    assert vehicle.short_name == ""
    assert vehicle.is_premium is False
    assert vehicle.small_icon_url == ""


# ==============================================================================
# to_vehicles()
# ==============================================================================


def test_to_vehicles_keeps_payload_order() -> None:
    payload = VehiclesPayloadDTO(
        status="ok",
        data={
            "10": {"tank_id": 10, "name": "B", "tier": 2},
            "3": {"tank_id": 3, "name": "A", "tier": 1},
        },
    )

    assert [v.vehicle_id for v in VehiclesPayloadMapper.to_vehicles(payload)] == [10, 3]


def test_to_vehicles_missing_data_is_empty() -> None:
    assert VehiclesPayloadMapper.to_vehicles(VehiclesPayloadDTO(status="ok")) == []


def test_to_vehicles_error_payload() -> None:
    payload = VehiclesPayloadDTO(
        status="error",
        error=ApiErrorDTO(code="REQUEST_LIMIT_EXCEEDED", message="Too many requests"),
    )

    with pytest.raises(ApiError) as exc_info:
        VehiclesPayloadMapper.to_vehicles(payload)

    assert exc_info.value.message == "Too many requests"
    assert exc_info.value.api_code == "REQUEST_LIMIT_EXCEEDED"


def test_to_vehicles_error_payload_ignores_data() -> None:
    payload = VehiclesPayloadDTO(
        status="error",
        data={"1": {"tank_id": 1, "name": "Löwe", "tier": 8}},
    )

    with pytest.raises(ApiError, match=ApiError.DEFAULT_MESSAGE):
        VehiclesPayloadMapper.to_vehicles(payload)


def test_to_vehicles_rejects_invalid_tier() -> None:
    payload = VehiclesPayloadDTO(
        status="ok",
        data={"1": {"tank_id": 1, "name": "Löwe", "tier": 0}},
    )

    with pytest.raises(ApiError):
        VehiclesPayloadMapper.to_vehicles(payload)
