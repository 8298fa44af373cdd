"""Shared test configuration and in-memory fakes of the repository ports.

The application reads its settings at import time, so the required
environment is provided here before any ``hausdog`` module is imported.
"""

import os

_TEST_ENV = {
    "SUPABASE_URL": "https://testproject.supabase.co",
    "SUPABASE_KEY": "test-anon-key",
    "DATABASE_URL": "sqlite:///:memory:",
    "GEMINI_API_KEY": "test-gemini-key",
    "ANTHROPIC_API_KEY": "test-anthropic-key",
    "NODE_ENV": "test",
    "INGEST_EMAIL_DOMAIN": "ingest.hausdog.test",
}

for _name, _value in _TEST_ENV.items():
    os.environ[_name] = _value

import pytest

from hausdog.application.interfaces import (
    ApiKeyRepository,
    CategoryRepository,
    ComponentRepository,
    MaintenanceTaskRepository,
    PropertyRepository,
    ServiceRecordRepository,
    SpaceRepository,
    SystemRepository,
)
from hausdog.domain.entities import (
    STATUS_ACTIVE,
    STATUS_DISMISSED,
    ApiKey,
    Category,
    Component,
    MaintenanceTask,
    Property,
    ServiceRecord,
    Space,
    System,
)


class FakePropertyRepository(PropertyRepository):
    def __init__(self):
        self.items: dict[str, Property] = {}

    async def get_by_id(self, property_id: str) -> Property | None:
        return self.items.get(property_id)

    async def get_by_ingest_token(self, token: str) -> Property | None:
        return next((p for p in self.items.values() if p.ingest_token == token), None)

    async def get_all_for_user(self, user_id: str) -> list[Property]:
        return [p for p in self.items.values() if p.user_id == user_id]

    async def create(self, prop: Property) -> Property:
        self.items[prop.id] = prop
        return prop

    async def update(self, prop: Property) -> Property:
        if prop.id not in self.items:
            raise ValueError(f"Property {prop.id} not found")
        self.items[prop.id] = prop
        return prop

    async def delete(self, property_id: str) -> bool:
        return self.items.pop(property_id, None) is not None


class FakeCategoryRepository(CategoryRepository):
    def __init__(self):
        self.items: dict[str, Category] = {}

    async def get_by_id(self, category_id: str) -> Category | None:
        return self.items.get(category_id)

    async def get_all(self) -> list[Category]:
        return sorted(self.items.values(), key=lambda c: c.sort_order)

    async def create(self, category: Category) -> Category:
        self.items[category.id] = category
        return category


class FakeSystemRepository(SystemRepository):
    def __init__(self):
        self.items: dict[str, System] = {}

    async def get_by_id(self, system_id: str) -> System | None:
        return self.items.get(system_id)

    async def get_all_for_property(self, property_id: str) -> list[System]:
        return [s for s in self.items.values() if s.property_id == property_id]

    async def create(self, system: System) -> System:
        self.items[system.id] = system
        return system

    async def update(self, system: System) -> System:
        self.items[system.id] = system
        return system

    async def delete(self, system_id: str) -> bool:
        return self.items.pop(system_id, None) is not None


class FakeSpaceRepository(SpaceRepository):
    def __init__(self, systems: FakeSystemRepository | None = None):
        self.items: dict[str, Space] = {}
        self._systems = systems

    async def get_by_id(self, space_id: str) -> Space | None:
        return self.items.get(space_id)

    async def get_all_for_property(self, property_id: str) -> list[Space]:
        spaces = sorted(
            (s for s in self.items.values() if s.property_id == property_id),
            key=lambda s: s.name,
        )
        for space in spaces:
            systems = self._systems.items.values() if self._systems else []
            space.item_count = sum(1 for system in systems if system.space_id == space.id)
        return spaces

    async def create(self, space: Space) -> Space:
        self.items[space.id] = space
        return space

    async def update(self, space: Space) -> Space:
        self.items[space.id] = space
        return space

    async def delete(self, space_id: str) -> bool:
        return self.items.pop(space_id, None) is not None


class FakeComponentRepository(ComponentRepository):
    def __init__(self):
        self.items: dict[str, Component] = {}

    async def get_by_id(self, component_id: str) -> Component | None:
        return self.items.get(component_id)

    async def get_all_for_system(self, system_id: str) -> list[Component]:
        return [c for c in self.items.values() if c.system_id == system_id]

    async def create(self, component: Component) -> Component:
        self.items[component.id] = component
        return component

    async def update(self, component: Component) -> Component:
        self.items[component.id] = component
        return component

    async def delete(self, component_id: str) -> bool:
        return self.items.pop(component_id, None) is not None


class FakeMaintenanceTaskRepository(MaintenanceTaskRepository):
    def __init__(self):
        self.items: dict[str, MaintenanceTask] = {}

    def _sorted(self, tasks) -> list[MaintenanceTask]:
        return sorted(tasks, key=lambda t: (t.next_due_date, t.name))

    async def get_by_id(self, task_id: str) -> MaintenanceTask | None:
        return self.items.get(task_id)

    async def get_all_for_property(self, property_id: str) -> list[MaintenanceTask]:
        return self._sorted(
            t for t in self.items.values()
            if t.property_id == property_id and t.status != STATUS_DISMISSED
        )

    async def get_all_for_system(self, system_id: str) -> list[MaintenanceTask]:
        return self._sorted(
            t for t in self.items.values()
            if t.system_id == system_id and t.status != STATUS_DISMISSED
        )

    async def get_upcoming(self, property_ids: list[str], limit: int) -> list[MaintenanceTask]:
        return self._sorted(
            t for t in self.items.values()
            if t.property_id in property_ids and t.status == STATUS_ACTIVE
        )[:limit]

    async def create(self, task: MaintenanceTask) -> MaintenanceTask:
        self.items[task.id] = task
        return task

    async def update(self, task: MaintenanceTask) -> MaintenanceTask:
        self.items[task.id] = task
        return task

    async def delete(self, task_id: str) -> bool:
        return self.items.pop(task_id, None) is not None


class FakeApiKeyRepository(ApiKeyRepository):
    def __init__(self):
        self.items: dict[str, ApiKey] = {}

    async def get_by_id(self, key_id: str) -> ApiKey | None:
        return self.items.get(key_id)

    async def get_by_hash(self, key_hash: str) -> ApiKey | None:
        return next((k for k in self.items.values() if k.key_hash == key_hash), None)

    async def get_all_for_user(self, user_id: str) -> list[ApiKey]:
        keys = [k for k in self.items.values() if k.user_id == user_id]
        return sorted(keys, key=lambda k: k.created_at, reverse=True)

    async def create(self, api_key: ApiKey) -> ApiKey:
        self.items[api_key.id] = api_key
        return api_key

    async def mark_used(self, key_id: str, used_at) -> None:
        self.items[key_id].last_used_at = used_at

    async def delete(self, key_id: str) -> bool:
        return self.items.pop(key_id, None) is not None


class FakeServiceRecordRepository(ServiceRecordRepository):
    def __init__(self):
        self.items: dict[str, ServiceRecord] = {}

    async def get_by_id(self, record_id: str) -> ServiceRecord | None:
        return self.items.get(record_id)

    async def get_all(
        self,
        *,
        property_id: str | None = None,
        system_id: str | None = None,
        component_id: str | None = None,
    ) -> list[ServiceRecord]:
        records = [
            r
            for r in self.items.values()
            if (property_id is None or r.property_id == property_id)
            and (system_id is None or r.system_id == system_id)
            and (component_id is None or r.component_id == component_id)
        ]
        return sorted(records, key=lambda r: r.service_date, reverse=True)

    async def create(self, record: ServiceRecord) -> ServiceRecord:
        self.items[record.id] = record
        return record

    async def update(self, record: ServiceRecord) -> ServiceRecord:
        self.items[record.id] = record
        return record

    async def delete(self, record_id: str) -> bool:
        return self.items.pop(record_id, None) is not None


@pytest.fixture
def property_repo() -> FakePropertyRepository:
    return FakePropertyRepository()


@pytest.fixture
def category_repo() -> FakeCategoryRepository:
    return FakeCategoryRepository()


@pytest.fixture
def system_repo() -> FakeSystemRepository:
    return FakeSystemRepository()


@pytest.fixture
def space_repo(system_repo: FakeSystemRepository) -> FakeSpaceRepository:
    return FakeSpaceRepository(system_repo)


@pytest.fixture
def component_repo() -> FakeComponentRepository:
    return FakeComponentRepository()


@pytest.fixture
def service_record_repo() -> FakeServiceRecordRepository:
    return FakeServiceRecordRepository()


@pytest.fixture
def maintenance_repo() -> FakeMaintenanceTaskRepository:
    return FakeMaintenanceTaskRepository()


@pytest.fixture
def api_key_repo() -> FakeApiKeyRepository:
    return FakeApiKeyRepository()
