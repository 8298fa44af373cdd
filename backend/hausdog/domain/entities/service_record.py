"""Domain entity — a logged maintenance, repair or inspection event."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import uuid4

_MUTABLE_FIELDS = frozenset({
    "service_date",
    "service_type",
    "provider",
    "cost",
    "notes",
})


@dataclass
class ServiceRecord:
    """Service event of a property, optionally tied to a system, component or document."""

    property_id: str
    service_date: date
    service_type: str
    id: str = field(default_factory=lambda: str(uuid4()))
    system_id: str | None = None
    component_id: str | None = None
    document_id: str | None = None
    provider: str | None = None
    cost: Decimal | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply field changes and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"ServiceRecord.{name} cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
