"""Domain entity — pure Python business object for a room or area of a property."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Space:
    """A named subdivision of a property.

    item_count is only populated by listings and counts the systems
    located in the space.
    """

    property_id: str
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    item_count: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str | None = None) -> None:
        """Update space fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        self.updated_at = datetime.now(timezone.utc)
