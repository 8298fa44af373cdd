"""Domain entity — a sub-part of a system (filter, blower motor, ...)."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

_MUTABLE_FIELDS = frozenset({
    "name",
    "manufacturer",
    "model",
    "serial_number",
    "install_date",
    "warranty_expires",
    "notes",
})


@dataclass
class Component:
    """Internal representation: dates are native date/datetime values.

    The wire form with ISO-8601 strings lives in the application schemas.
    """

    system_id: str
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
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
                raise AttributeError(f"Component.{name} cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
