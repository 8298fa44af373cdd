"""Domain entity — reference data grouping systems (HVAC, Plumbing, ...)."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Category:
    """Read-only classification for systems, ordered by sort_order."""

    name: str
    icon: str | None = None
    sort_order: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))


DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("HVAC", "thermometer"),
    ("Plumbing", "droplet"),
    ("Electrical", "zap"),
    ("Appliances", "home"),
    ("Roofing", "cloud"),
    ("Exterior", "sun"),
    ("Interior", "square"),
    ("Landscaping", "tree"),
    ("Security", "shield"),
    ("Other", "more-horizontal"),
)
