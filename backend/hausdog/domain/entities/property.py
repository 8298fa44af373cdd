"""Domain entity — a home or unit owned by a user; root of the domain hierarchy."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

_MUTABLE_FIELDS = frozenset({
    "name",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "county",
    "neighborhood",
    "latitude",
    "longitude",
    "timezone",
    "plus_code",
    "google_place_id",
    "formatted_address",
    "google_place_data",
    "year_built",
    "square_feet",
    "property_type",
    "purchase_date",
})


@dataclass
class Property:
    """Core domain entity for a tracked property.

    Address fields are flattened onto the entity; all of them are optional
    because a property can be created from a bare name.
    """

    user_id: str
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    county: str | None = None
    neighborhood: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    plus_code: str | None = None
    google_place_id: str | None = None
    formatted_address: str | None = None
    google_place_data: dict[str, Any] | None = None
    year_built: int | None = None
    square_feet: int | None = None
    property_type: str | None = None
    purchase_date: date | None = None
    ingest_token: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def address_line(self) -> str | None:
        """Best single-line address available, if any."""
        return self.formatted_address or self.street_address

    def update(self, **changes: Any) -> None:
        """Apply field changes and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"Property.{name} cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
