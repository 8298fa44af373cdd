"""Pydantic DTO for structured, geocoded address data."""

from typing import Any

from pydantic import BaseModel, Field


class AddressData(BaseModel):
    """Geocoding result for a property address — every field is nullable.

    google_place_data carries the raw provider payload untouched.
    """

    street_address: str | None
    city: str | None
    state: str | None
    postal_code: str | None
    country: str | None
    county: str | None
    neighborhood: str | None
    latitude: float | None = Field(..., ge=-90, le=90)
    longitude: float | None = Field(..., ge=-180, le=180)
    timezone: str | None
    plus_code: str | None
    google_place_id: str | None
    formatted_address: str | None
    google_place_data: dict[str, Any] | None

    model_config = {"from_attributes": True}


EMPTY_ADDRESS_DATA = AddressData(
    street_address=None,
    city=None,
    state=None,
    postal_code=None,
    country=None,
    county=None,
    neighborhood=None,
    latitude=None,
    longitude=None,
    timezone=None,
    plus_code=None,
    google_place_id=None,
    formatted_address=None,
    google_place_data=None,
)
