"""Domain entity — a tracked mechanical or electrical asset within a property."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

_MUTABLE_FIELDS = frozenset({
    "category_id",
    "space_id",
    "name",
    "manufacturer",
    "model",
    "serial_number",
    "install_date",
    "warranty_expires",
    "notes",
})


@dataclass
class System:
    """A system (furnace, water heater, ...) installed in a property."""

    property_id: str
    category_id: str
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    space_id: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    install_date: date | None = None
    warranty_expires: date | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply field changes and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"System.{name} cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
