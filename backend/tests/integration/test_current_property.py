"""Tests for the current-property cookie endpoints."""

from urllib.parse import quote
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from hausdog.main import app
from hausdog.presentation.current_property_cookie import COOKIE_NAME


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_nothing_stored_reads_null():
    async with _client() as client:
        response = await client.get("/api/v1/current-property")

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_store_then_read_back():
    value = {"id": str(uuid4()), "name": "Lake House"}

    async with _client() as client:
        stored = await client.put("/api/v1/current-property", json=value)
        assert stored.status_code == 200
        assert stored.json() == value
        assert "Max-Age=31536000" in stored.headers["set-cookie"]

        cookie = stored.headers["set-cookie"].split(";")[0]
        read = await client.get("/api/v1/current-property", headers={"Cookie": cookie})

    assert read.json() == value


@pytest.mark.asyncio
async def test_null_body_clears_cookie():
    async with _client() as client:
        response = await client.put(
            "/api/v1/current-property",
            content="null",
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 200
    assert response.json() is None
    assert "Max-Age=0" in response.headers["set-cookie"]


@pytest.mark.asyncio
async def test_malformed_cookie_reads_null():
    garbage = quote('{"id": "not-a-uuid", "name": "x"}', safe="")
    async with _client() as client:
        response = await client.get(
            "/api/v1/current-property", headers={"Cookie": f"{COOKIE_NAME}={garbage}"}
        )

    assert response.json() is None


@pytest.mark.asyncio
async def test_invalid_body_is_rejected():
    async with _client() as client:
        response = await client.put(
            "/api/v1/current-property", json={"id": str(uuid4()), "name": ""}
        )

    assert response.status_code == 422
