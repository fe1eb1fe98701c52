from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.tanki.su/wot/encyclopedia/vehicles/"
DEFAULT_APPLICATION_ID = "22716c2a0bff5e7fbced747f4c19b614"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Fields requested from the encyclopedia endpoint (API names, not domain names)
VEHICLE_FIELDS: tuple[str, ...] = (
    "tank_id",
    "name",
    "short_name",
    "tier",
    "type",
    "nation",
    "is_premium",
    "is_gift",
    "images.small_icon",
)


@dataclass(frozen=True, slots=True)
class CatalogApiConfig:
    api_url: str = DEFAULT_API_URL
    application_id: str = DEFAULT_APPLICATION_ID
    fields: tuple[str, ...] = VEHICLE_FIELDS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def query_params(self) -> dict[str, str]:
        return {
            "application_id": self.application_id,
            "fields": ",".join(self.fields),
        }


def catalog_api_config() -> CatalogApiConfig:
    """
    Build the catalog API configuration.

    Built-in defaults can be overridden with TANKS_API_URL,
    TANKS_APPLICATION_ID and TANKS_API_TIMEOUT.
    """
    timeout = os.getenv("TANKS_API_TIMEOUT")

    return CatalogApiConfig(
        api_url=os.getenv("TANKS_API_URL") or DEFAULT_API_URL,
        application_id=os.getenv("TANKS_APPLICATION_ID") or DEFAULT_APPLICATION_ID,
        timeout_seconds=float(timeout) if timeout else DEFAULT_TIMEOUT_SECONDS,
    )
