"""Domain entity — a recurring upkeep chore for a property or one of its systems."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

from dateutil.relativedelta import relativedelta

SOURCE_USER_CREATED = "user_created"
SOURCE_AI_SUGGESTED = "ai_suggested"

STATUS_ACTIVE = "active"
STATUS_PAUSED = "paused"
STATUS_DISMISSED = "dismissed"

TASK_STATUSES = (STATUS_ACTIVE, STATUS_PAUSED, STATUS_DISMISSED)

_MUTABLE_FIELDS = frozenset({
    "name",
    "description",
    "interval_months",
    "next_due_date",
    "status",
})


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of shorter months."""
    return value + relativedelta(months=months)


@dataclass
class MaintenanceTask:
    """A task due every interval_months, starting at next_due_date."""

    property_id: str
    name: str
    interval_months: int
    next_due_date: date
    created_by_id: str
    updated_by_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    system_id: str | None = None
    description: str | None = None
    last_completed_at: date | None = None
    source: str = SOURCE_USER_CREATED
    status: str = STATUS_ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, user_id: str, **changes: Any) -> None:
        """Apply field changes on behalf of user_id."""
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"MaintenanceTask.{name} cannot be updated")
            setattr(self, name, value)
        self._touch(user_id)

    def complete(self, user_id: str, completed_on: date) -> None:
        """Record completion; the next occurrence is one interval after completed_on."""
        self.last_completed_at = completed_on
        self.next_due_date = add_months(completed_on, self.interval_months)
        self._touch(user_id)

    def snooze(self, user_id: str) -> None:
        """Skip one occurrence: push the due date out by one interval."""
        self.next_due_date = add_months(self.next_due_date, self.interval_months)
        self._touch(user_id)

    def dismiss(self, user_id: str) -> None:
        self.status = STATUS_DISMISSED
        self._touch(user_id)

    def _touch(self, user_id: str) -> None:
        self.updated_by_id = user_id
        self.updated_at = datetime.now(timezone.utc)
