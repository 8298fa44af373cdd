"""Unit tests for the MaintenanceService."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from hausdog.application.schemas import (
    MaintenanceTaskComplete,
    MaintenanceTaskCreate,
    MaintenanceTaskUpdate,
)
from hausdog.application.services import MaintenanceService
from hausdog.domain.entities import STATUS_ACTIVE, STATUS_DISMISSED, STATUS_PAUSED, add_months
from hausdog.domain.exceptions import EntityNotFoundError

OWNER = "user-1"
PROPERTY_ID = str(uuid4())
SYSTEM_ID = str(uuid4())


@pytest.fixture
def service(maintenance_repo, service_record_repo) -> MaintenanceService:
    return MaintenanceService(maintenance_repo, service_record_repo)


def _task(**overrides) -> MaintenanceTaskCreate:
    fields = {
        "property_id": PROPERTY_ID,
        "system_id": SYSTEM_ID,
        "name": "Replace furnace filter",
        "interval_months": 3,
        "next_due_date": date(2024, 4, 1),
    }
    fields.update(overrides)
    return MaintenanceTaskCreate(**fields)


@pytest.mark.parametrize(
    ("start", "months", "expected"),
    [
        (date(2024, 1, 15), 1, date(2024, 2, 15)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 11, 30), 3, date(2025, 2, 28)),
        (date(2024, 2, 29), 12, date(2025, 2, 28)),
    ],
)
def test_add_months_clamps_to_month_end(start: date, months: int, expected: date):
    assert add_months(start, months) == expected


@pytest.mark.asyncio
async def test_create_task_records_author(service: MaintenanceService):
    task = await service.create_task(OWNER, _task())

    assert task.created_by_id == OWNER
    assert task.updated_by_id == OWNER
    assert task.status == STATUS_ACTIVE
    assert task.source == "user_created"
    assert task.last_completed_at is None


@pytest.mark.asyncio
async def test_complete_logs_record_and_advances_due_date(
    service: MaintenanceService, service_record_repo
):
    task = await service.create_task(OWNER, _task())

    completed = await service.complete_task(
        task.id,
        "user-3",
        MaintenanceTaskComplete(
            completed_on=date(2024, 3, 28), cost="24.99", performed_by="Self"
        ),
    )

    assert completed.last_completed_at == date(2024, 3, 28)
    assert completed.next_due_date == date(2024, 6, 28)
    assert completed.updated_by_id == "user-3"

    records = await service_record_repo.get_all(system_id=SYSTEM_ID)
    assert len(records) == 1
    record = records[0]
    assert record.property_id == PROPERTY_ID
    assert record.service_type == "maintenance"
    assert record.service_date == date(2024, 3, 28)
    assert record.cost == Decimal("24.99")
    assert record.provider == "Self"
    assert record.notes == "Replace furnace filter"


@pytest.mark.asyncio
async def test_complete_property_wide_task_logs_property_record(
    service: MaintenanceService, service_record_repo
):
    task = await service.create_task(
        OWNER, _task(system_id=None, name="Clean gutters", interval_months=6)
    )

    await service.complete_task(
        task.id,
        OWNER,
        MaintenanceTaskComplete(completed_on=date(2024, 8, 31), description="Front and back"),
    )

    assert (await service.get_task(task.id)).next_due_date == date(2025, 2, 28)
    records = await service_record_repo.get_all(property_id=PROPERTY_ID)
    assert [(r.system_id, r.notes) for r in records] == [(None, "Front and back")]


@pytest.mark.asyncio
async def test_snooze_pushes_due_date_by_one_interval(service: MaintenanceService):
    task = await service.create_task(OWNER, _task(next_due_date=date(2024, 1, 31)))

    snoozed = await service.snooze_task(task.id, OWNER)

    assert snoozed.next_due_date == date(2024, 4, 30)
    assert snoozed.last_completed_at is None


@pytest.mark.asyncio
async def test_dismissed_task_leaves_the_lists(service: MaintenanceService):
    kept = await service.create_task(OWNER, _task(name="Test smoke alarms"))
    dropped = await service.create_task(OWNER, _task(name="Drain sprinklers"))

    dismissed = await service.dismiss_task(dropped.id, OWNER)

    assert dismissed.status == STATUS_DISMISSED
    assert [t.id for t in await service.list_for_property(PROPERTY_ID)] == [kept.id]
    assert [t.id for t in await service.list_for_system(SYSTEM_ID)] == [kept.id]
    assert (await service.get_task(dropped.id)).status == STATUS_DISMISSED


@pytest.mark.asyncio
async def test_upcoming_lists_active_tasks_soonest_first(service: MaintenanceService):
    other_property = str(uuid4())
    late = await service.create_task(OWNER, _task(name="Late", next_due_date=date(2024, 9, 1)))
    soon = await service.create_task(OWNER, _task(name="Soon", next_due_date=date(2024, 5, 1)))
    paused = await service.create_task(OWNER, _task(name="Paused", next_due_date=date(2024, 4, 1)))
    await service.update_task(paused.id, OWNER, MaintenanceTaskUpdate(status=STATUS_PAUSED))
    await service.create_task(
        OWNER, _task(property_id=other_property, next_due_date=date(2024, 1, 1))
    )

    upcoming = await service.list_upcoming([PROPERTY_ID])
    assert [t.id for t in upcoming] == [soon.id, late.id]
    assert [t.id for t in await service.list_upcoming([PROPERTY_ID], limit=1)] == [soon.id]
    assert await service.list_upcoming([]) == []


@pytest.mark.asyncio
async def test_update_task_ignores_null_for_required_fields(service: MaintenanceService):
    task = await service.create_task(OWNER, _task(description="Use MERV 11"))

    updated = await service.update_task(
        task.id,
        "user-3",
        MaintenanceTaskUpdate.model_validate(
            {"name": None, "interval_months": 6, "description": None}
        ),
    )

    assert updated.name == "Replace furnace filter"
    assert updated.interval_months == 6
    assert updated.description is None
    assert updated.updated_by_id == "user-3"


@pytest.mark.asyncio
async def test_delete_task(service: MaintenanceService):
    task = await service.create_task(OWNER, _task())

    assert await service.delete_task(task.id) is True
    with pytest.raises(EntityNotFoundError):
        await service.get_task(task.id)
    with pytest.raises(EntityNotFoundError):
        await service.complete_task(task.id, OWNER, MaintenanceTaskComplete(completed_on=date.today()))
