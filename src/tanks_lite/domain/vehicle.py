from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    vehicle_id: int
    name: str
    short_name: str
    tier: int
    vehicle_type: str
    nation: str
    is_premium: bool
    is_gift: bool
    small_icon_url: str

    @property
    def is_special(self) -> bool:
        """Premium and gift vehicles share the same status badge."""
        return self.is_premium or self.is_gift

    @property
    def secure_icon_url(self) -> str:
        """Icon URL upgraded to https (the API still serves plain http links)."""
        if self.small_icon_url.startswith("http://"):
            return "https://" + self.small_icon_url[len("http://") :]
        return self.small_icon_url
