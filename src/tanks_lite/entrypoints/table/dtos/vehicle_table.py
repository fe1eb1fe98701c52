from pydantic import BaseModel, Field


class VehicleRowDTO(BaseModel):
    id: int
    name: str
    short_name: str
    tier: int
    type: str
    nation: str
    is_special: bool = Field(description="Premium or gift vehicle (status badge)")
    icon_url: str = Field(description="Small icon, always https")


class VehicleTableViewDTO(BaseModel):
    """Everything the renderer needs to draw the vehicle table."""

    vehicles: list[VehicleRowDTO]
    total_count: int = Field(description="Vehicles in the loaded catalog")
    filtered_count: int = Field(description="Vehicles matching the query")
    query: str
    page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    page_size: int = Field(ge=1)
    page_size_options: list[int]
    has_previous: bool
    has_next: bool
    is_loading: bool
    error_message: str | None = None
    is_empty: bool = Field(description="Loaded without error, but nothing matched")
