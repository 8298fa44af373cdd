"""End-to-end endpoint tests with in-memory repositories behind the services."""

from uuid import uuid4

import pytest
from fastapi import Header
from httpx import ASGITransport, AsyncClient

from hausdog.application.interfaces import IdentityProvider
from hausdog.application.services import (
    AccessService,
    ApiKeyService,
    AuthService,
    CategoryService,
    ComponentService,
    MaintenanceService,
    PropertyService,
    ServiceRecordService,
    SpaceService,
    SystemService,
)
from hausdog.domain.entities import AuthSession, AuthUser
from hausdog.domain.exceptions import IdentityProviderError
from hausdog.infrastructure import dependencies
from hausdog.main import app

OWNER = {"Authorization": "Bearer owner"}
STRANGER = {"Authorization": "Bearer stranger"}


def _current_user(authorization: str | None = Header(None)) -> AuthUser:
    return AuthUser(id="user-2" if authorization == STRANGER["Authorization"] else "user-1")


@pytest.fixture
def client(
    property_repo,
    category_repo,
    space_repo,
    system_repo,
    component_repo,
    service_record_repo,
    maintenance_repo,
    api_key_repo,
):
    app.dependency_overrides.update(
        {
            dependencies.get_current_user: _current_user,
            dependencies.get_property_service: lambda: PropertyService(property_repo),
            dependencies.get_category_service: lambda: CategoryService(category_repo),
            dependencies.get_space_service: lambda: SpaceService(space_repo),
            dependencies.get_system_service: lambda: SystemService(system_repo),
            dependencies.get_component_service: lambda: ComponentService(component_repo),
            dependencies.get_service_record_service: lambda: ServiceRecordService(service_record_repo),
            dependencies.get_maintenance_service: lambda: MaintenanceService(
                maintenance_repo, service_record_repo
            ),
            dependencies.get_api_key_service: lambda: ApiKeyService(api_key_repo),
            dependencies.get_access_service: lambda: AccessService(
                properties=property_repo,
                spaces=space_repo,
                systems=system_repo,
                components=component_repo,
                service_records=service_record_repo,
                maintenance_tasks=maintenance_repo,
            ),
        }
    )
    yield AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_property_lifecycle(client: AsyncClient):
    async with client:
        created = await client.post(
            "/api/v1/properties",
            json={"name": "Lake House", "year_built": 1985},
            headers=OWNER,
        )
        assert created.status_code == 201
        body = created.json()
        assert body["address"]["city"] is None
        assert body["ingest_email"] == f"{body['ingest_token']}@ingest.hausdog.test"

        listed = await client.get("/api/v1/properties", headers=OWNER)
        assert [p["name"] for p in listed.json()] == ["Lake House"]

        hidden = await client.get(f"/api/v1/properties/{body['id']}", headers=STRANGER)
        assert hidden.status_code == 404

        by_email = await client.get(
            "/api/v1/properties/by-ingest-email",
            params={"email": body["ingest_email"]},
            headers=OWNER,
        )
        assert by_email.json()["id"] == body["id"]

        updated = await client.put(
            f"/api/v1/properties/{body['id']}",
            json={"name": "Lake Cabin", "year_built": None},
            headers=OWNER,
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Lake Cabin"
        assert updated.json()["year_built"] is None

        deleted = await client.delete(f"/api/v1/properties/{body['id']}", headers=OWNER)
        assert deleted.status_code == 204
        missing = await client.get(f"/api/v1/properties/{body['id']}", headers=OWNER)
        assert missing.status_code == 404


@pytest.mark.asyncio
async def test_invalid_property_body_reports_fields(client: AsyncClient):
    async with client:
        response = await client.post(
            "/api/v1/properties", json={"name": "", "square_feet": -1}, headers=OWNER
        )

    assert response.status_code == 422
    locations = {tuple(err["loc"]) for err in response.json()["detail"]}
    assert locations == {("body", "name"), ("body", "square_feet")}


@pytest.mark.asyncio
async def test_spaces_systems_and_records(client: AsyncClient, category_repo):
    await CategoryService(category_repo).seed_defaults()
    hvac = (await category_repo.get_all())[0]

    async with client:
        prop = (
            await client.post("/api/v1/properties", json={"name": "Home"}, headers=OWNER)
        ).json()

        empty = await client.post(
            "/api/v1/spaces", json={"property_id": prop["id"], "name": ""}, headers=OWNER
        )
        assert empty.status_code == 422

        space = (
            await client.post(
                "/api/v1/spaces", json={"property_id": prop["id"], "name": "Basement"}, headers=OWNER
            )
        ).json()

        system_response = await client.post(
            "/api/v1/systems",
            json={
                "property_id": prop["id"],
                "category_id": hvac.id,
                "space_id": space["id"],
                "name": "Furnace",
                "install_date": "2015-10-01",
            },
            headers=OWNER,
        )
        assert system_response.status_code == 201
        system = system_response.json()
        assert system["category"]["name"] == "HVAC"

        spaces = await client.get(f"/api/v1/properties/{prop['id']}/spaces", headers=OWNER)
        assert [(s["name"], s["item_count"]) for s in spaces.json()] == [("Basement", 1)]

        component = await client.post(
            "/api/v1/components",
            json={"system_id": system["id"], "name": "Filter", "install_date": "2023-02-01"},
            headers=OWNER,
        )
        assert component.status_code == 201
        assert component.json()["install_date"] == "2023-02-01"

        record = await client.post(
            "/api/v1/service-records",
            json={
                "system_id": system["id"],
                "service_date": "2024-03-01",
                "service_type": "Inspection",
                "cost": 0,
            },
            headers=OWNER,
        )
        assert record.status_code == 422

        record = await client.post(
            "/api/v1/service-records",
            json={"system_id": system["id"], "service_date": "2024-03-01", "service_type": "Inspection"},
            headers=OWNER,
        )
        assert record.status_code == 201

        history = await client.get(
            f"/api/v1/systems/{system['id']}/service-records", headers=OWNER
        )
        assert [r["service_type"] for r in history.json()] == ["Inspection"]

        foreign = await client.get(f"/api/v1/systems/{system['id']}", headers=STRANGER)
        assert foreign.status_code == 404


@pytest.mark.asyncio
async def test_system_with_unknown_category_is_not_found(client: AsyncClient):
    async with client:
        prop = (
            await client.post("/api/v1/properties", json={"name": "Home"}, headers=OWNER)
        ).json()
        response = await client.post(
            "/api/v1/systems",
            json={"property_id": prop["id"], "category_id": str(uuid4()), "name": "Boiler"},
            headers=OWNER,
        )

    assert response.status_code == 404


class _RejectingIdentityProvider(IdentityProvider):
    @property
    def provider_name(self) -> str:
        return "stub"

    async def exchange_code_for_session(self, code, code_verifier=None) -> AuthSession:
        raise IdentityProviderError("stub", 400, "unused")

    async def get_user(self, access_token: str) -> AuthUser:
        raise IdentityProviderError("stub", 401, "bad token")


async def _create_property(client: AsyncClient, headers=OWNER) -> dict:
    response = await client.post("/api/v1/properties", json={"name": "Home"}, headers=headers)
    assert response.status_code == 201
    return response.json()


async def _create_system(client: AsyncClient, category_repo, property_id: str) -> dict:
    await CategoryService(category_repo).seed_defaults()
    hvac = (await category_repo.get_all())[0]
    response = await client.post(
        "/api/v1/systems",
        json={"property_id": property_id, "category_id": hvac.id, "name": "Furnace"},
        headers=OWNER,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_document_only_service_record(client: AsyncClient):
    async with client:
        prop = await _create_property(client)
        document_id = str(uuid4())

        unplaced = await client.post(
            "/api/v1/service-records",
            json={"document_id": document_id, "service_date": "2024-06-01", "service_type": "Roof"},
            headers=OWNER,
        )
        assert unplaced.status_code == 422

        created = await client.post(
            "/api/v1/service-records",
            json={
                "property_id": prop["id"],
                "document_id": document_id,
                "service_date": "2024-06-01",
                "service_type": "Roof inspection",
                "cost": "1250.00",
            },
            headers=OWNER,
        )
        assert created.status_code == 201
        body = created.json()
        assert body["property_id"] == prop["id"]
        assert body["system_id"] is None
        assert body["cost"] == 1250.0

        listed = await client.get(
            f"/api/v1/properties/{prop['id']}/service-records", headers=OWNER
        )
        assert [r["document_id"] for r in listed.json()] == [document_id]

        hidden = await client.get(
            f"/api/v1/properties/{prop['id']}/service-records", headers=STRANGER
        )
        assert hidden.status_code == 404

        foreign = await client.post(
            "/api/v1/service-records",
            json={
                "property_id": prop["id"],
                "service_date": "2024-06-01",
                "service_type": "Roof inspection",
            },
            headers=STRANGER,
        )
        assert foreign.status_code == 404


@pytest.mark.asyncio
async def test_service_record_targets_must_share_a_property(client: AsyncClient, category_repo):
    async with client:
        home = await _create_property(client)
        cabin = await _create_property(client)
        system = await _create_system(client, category_repo, home["id"])

        response = await client.post(
            "/api/v1/service-records",
            json={
                "property_id": cabin["id"],
                "system_id": system["id"],
                "service_date": "2024-06-01",
                "service_type": "Tune-up",
            },
            headers=OWNER,
        )
        assert response.status_code == 404

        response = await client.post(
            "/api/v1/service-records",
            json={"system_id": system["id"], "service_date": "2024-06-01", "service_type": "Tune-up"},
            headers=OWNER,
        )
        assert response.status_code == 201
        assert response.json()["property_id"] == home["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("cost", ["0.001", 100000000, "99999999.999"])
async def test_service_record_cost_outside_money_column_is_rejected(
    client: AsyncClient, category_repo, cost
):
    async with client:
        prop = await _create_property(client)
        system = await _create_system(client, category_repo, prop["id"])
        fields = {"system_id": system["id"], "service_date": "2024-03-01", "service_type": "Fix"}

        created = await client.post(
            "/api/v1/service-records", json=fields | {"cost": cost}, headers=OWNER
        )
        assert created.status_code == 422
        assert [tuple(e["loc"]) for e in created.json()["detail"]] == [("body", "cost")]

        record = (await client.post("/api/v1/service-records", json=fields, headers=OWNER)).json()
        updated = await client.put(
            f"/api/v1/service-records/{record['id']}", json={"cost": cost}, headers=OWNER
        )
        assert updated.status_code == 422

        exact = await client.put(
            f"/api/v1/service-records/{record['id']}", json={"cost": 149.99}, headers=OWNER
        )
        assert exact.status_code == 200
        assert exact.json()["cost"] == 149.99


@pytest.mark.asyncio
async def test_maintenance_task_lifecycle(client: AsyncClient, category_repo):
    async with client:
        prop = await _create_property(client)
        system = await _create_system(client, category_repo, prop["id"])

        created = await client.post(
            "/api/v1/maintenance",
            json={
                "property_id": prop["id"],
                "system_id": system["id"],
                "name": "Replace furnace filter",
                "interval_months": 3,
                "next_due_date": "2024-01-31",
            },
            headers=OWNER,
        )
        assert created.status_code == 201
        task = created.json()
        assert task["status"] == "active"
        assert task["source"] == "user_created"

        gutters = (
            await client.post(
                "/api/v1/maintenance",
                json={
                    "property_id": prop["id"],
                    "name": "Clean gutters",
                    "interval_months": 6,
                    "next_due_date": "2024-10-01",
                },
                headers=OWNER,
            )
        ).json()

        snoozed = await client.post(f"/api/v1/maintenance/{task['id']}/snooze", headers=OWNER)
        assert snoozed.json()["next_due_date"] == "2024-04-30"

        completed = await client.post(
            f"/api/v1/maintenance/{task['id']}/complete",
            json={"completed_on": "2024-04-20", "cost": "19.99", "performed_by": "Self"},
            headers=OWNER,
        )
        assert completed.status_code == 200
        assert completed.json()["last_completed_at"] == "2024-04-20"
        assert completed.json()["next_due_date"] == "2024-07-20"

        history = await client.get(
            f"/api/v1/systems/{system['id']}/service-records", headers=OWNER
        )
        assert [(r["service_type"], r["cost"]) for r in history.json()] == [("maintenance", 19.99)]

        upcoming = await client.get("/api/v1/maintenance/upcoming", headers=OWNER)
        assert [t["id"] for t in upcoming.json()] == [task["id"], gutters["id"]]
        limited = await client.get("/api/v1/maintenance/upcoming?limit=1", headers=OWNER)
        assert [t["id"] for t in limited.json()] == [task["id"]]
        assert (await client.get("/api/v1/maintenance/upcoming", headers=STRANGER)).json() == []

        paused = await client.put(
            f"/api/v1/maintenance/{gutters['id']}", json={"status": "paused"}, headers=OWNER
        )
        assert paused.json()["status"] == "paused"
        upcoming = await client.get("/api/v1/maintenance/upcoming", headers=OWNER)
        assert [t["id"] for t in upcoming.json()] == [task["id"]]

        dismissed = await client.post(f"/api/v1/maintenance/{task['id']}/dismiss", headers=OWNER)
        assert dismissed.json()["status"] == "dismissed"
        listed = await client.get(f"/api/v1/properties/{prop['id']}/maintenance", headers=OWNER)
        assert [t["id"] for t in listed.json()] == [gutters["id"]]
        by_system = await client.get(f"/api/v1/systems/{system['id']}/maintenance", headers=OWNER)
        assert by_system.json() == []

        deleted = await client.delete(f"/api/v1/maintenance/{task['id']}", headers=OWNER)
        assert deleted.status_code == 204
        assert (await client.get(f"/api/v1/maintenance/{task['id']}", headers=OWNER)).status_code == 404


@pytest.mark.asyncio
async def test_maintenance_tasks_are_private_to_the_owner(client: AsyncClient, category_repo):
    async with client:
        prop = await _create_property(client)
        other = await _create_property(client, headers=STRANGER)
        system = await _create_system(client, category_repo, prop["id"])

        misplaced = await client.post(
            "/api/v1/maintenance",
            json={
                "property_id": other["id"],
                "name": "Sneaky",
                "interval_months": 1,
                "next_due_date": "2024-01-01",
            },
            headers=OWNER,
        )
        assert misplaced.status_code == 404

        task = (
            await client.post(
                "/api/v1/maintenance",
                json={
                    "property_id": prop["id"],
                    "system_id": system["id"],
                    "name": "Test smoke alarms",
                    "interval_months": 6,
                    "next_due_date": "2024-06-01",
                },
                headers=OWNER,
            )
        ).json()

        for method, path in [
            ("GET", f"/api/v1/maintenance/{task['id']}"),
            ("POST", f"/api/v1/maintenance/{task['id']}/snooze"),
            ("POST", f"/api/v1/maintenance/{task['id']}/dismiss"),
            ("DELETE", f"/api/v1/maintenance/{task['id']}"),
            ("GET", f"/api/v1/properties/{prop['id']}/maintenance"),
        ]:
            response = await client.request(method, path, headers=STRANGER)
            assert response.status_code == 404, path

        bad_interval = await client.post(
            "/api/v1/maintenance",
            json={
                "property_id": prop["id"],
                "name": "Never",
                "interval_months": 0,
                "next_due_date": "2024-01-01",
            },
            headers=OWNER,
        )
        assert bad_interval.status_code == 422


@pytest.mark.asyncio
async def test_api_keys_authenticate_requests(client: AsyncClient, api_key_repo):
    async with client:
        issued = await client.post("/api/v1/api-keys", json={"name": "CLI"}, headers=OWNER)
        assert issued.status_code == 201
        secret = issued.json()["secret"]
        assert secret.startswith("hd_")

        listed = await client.get("/api/v1/api-keys", headers=OWNER)
        assert [k["name"] for k in listed.json()] == ["CLI"]
        assert "secret" not in listed.json()[0]
        assert listed.json()[0]["last_used_at"] is None

        await _create_property(client)

        app.dependency_overrides.pop(dependencies.get_current_user)
        app.dependency_overrides[dependencies.get_auth_service] = lambda: AuthService(
            _RejectingIdentityProvider()
        )

        keyed = await client.get(
            "/api/v1/properties", headers={"Authorization": f"Bearer {secret}"}
        )
        assert keyed.status_code == 200
        assert [p["name"] for p in keyed.json()] == ["Home"]
        [stored] = api_key_repo.items.values()
        assert stored.last_used_at is not None

        unknown = await client.get(
            "/api/v1/properties", headers={"Authorization": "Bearer hd_unknown"}
        )
        assert unknown.status_code == 401
        assert unknown.json()["detail"] == "Invalid API key"

        revoked = await client.delete(
            f"/api/v1/api-keys/{stored.id}", headers={"Authorization": f"Bearer {secret}"}
        )
        assert revoked.status_code == 204
        after = await client.get(
            "/api/v1/properties", headers={"Authorization": f"Bearer {secret}"}
        )
        assert after.status_code == 401


@pytest.mark.asyncio
async def test_api_key_of_another_user_cannot_be_revoked(client: AsyncClient):
    async with client:
        key = (await client.post("/api/v1/api-keys", json={"name": "CLI"}, headers=OWNER)).json()

        response = await client.delete(f"/api/v1/api-keys/{key['id']}", headers=STRANGER)
        assert response.status_code == 404
        assert (await client.get("/api/v1/api-keys", headers=STRANGER)).json() == []
        assert len((await client.get("/api/v1/api-keys", headers=OWNER)).json()) == 1
