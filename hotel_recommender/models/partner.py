"""Pydantic models for partner availability API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AvailableHotel(BaseModel):
    """Hotel entry returned by the partnerships endpoint."""

    name: str
    # Minor units; strings, floats and booleans are rejected
    price_in_usd_per_night: int = Field(alias="priceInUSDPerNight", strict=True)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PartnershipResponse(BaseModel):
    """Availability response from the partnerships endpoint."""

    available_hotels: list[AvailableHotel] = Field(
        default_factory=list, alias="availableHotels"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("available_hotels", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
