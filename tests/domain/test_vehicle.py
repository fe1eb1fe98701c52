"""Tests for the Vehicle entity."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from tanks_lite.domain.vehicle import Vehicle


@pytest.fixture()
def vehicle() -> Vehicle:
    return Vehicle(
        vehicle_id=2,
        name="Т-34",
        short_name="Т-34",
        tier=5,
        vehicle_type="mediumTank",
        nation="ussr",
        is_premium=False,
        is_gift=False,
        small_icon_url="http://example.com/t34.png",
    )


def test_is_immutable(vehicle: Vehicle) -> None:
    with pytest.raises(FrozenInstanceError):
        vehicle.tier = 6  # type: ignore[misc]


@pytest.mark.parametrize(
    ("is_premium", "is_gift", "expected"),
    [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
)
def test_is_special(vehicle: Vehicle, is_premium: bool, is_gift: bool, expected: bool) -> None:
    assert replace(vehicle, is_premium=is_premium, is_gift=is_gift).is_special is expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://example.com/t34.png", "https://example.com/t34.png"),
        ("https://example.com/t34.png", "https://example.com/t34.png"),
        ("//example.com/t34.png", "//example.com/t34.png"),
        ("", ""),
    ],
)
def test_secure_icon_url(vehicle: Vehicle, url: str, expected: str) -> None:
    assert replace(vehicle, small_icon_url=url).secure_icon_url == expected
