"""Wire models for the encyclopedia `vehicles` endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VehicleImagesDTO(BaseModel):
    small_icon: str = ""


class VehicleDTO(BaseModel):
    """One vehicle as returned by the API (only the requested fields)."""

    tank_id: int
    name: str
    short_name: str = ""
    tier: int = Field(ge=1)
    type: str = ""
    nation: str = ""
    is_premium: bool = False
    is_gift: bool = False
    images: VehicleImagesDTO = Field(default_factory=VehicleImagesDTO)

    model_config = ConfigDict(extra="ignore")


class ApiErrorDTO(BaseModel):
    code: str | int | None = None
    message: str | None = None

    model_config = ConfigDict(extra="ignore")


class VehiclesPayloadDTO(BaseModel):
    """Top-level payload.

    `status` is kept as a plain string: anything other than "ok" is
    treated as an error, including values the API does not document.

    Examples:
        {"status": "ok", "data": {"1": {...}, "17": {...}}}
        {"status": "error", "error": {"code": 407, "message": "INVALID_APPLICATION_ID"}}
    """

    status: str
    # Validated per vehicle once the status is known to be "ok"
    data: dict[str, Any] | None = None
    error: ApiErrorDTO | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
