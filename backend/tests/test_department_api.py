"""
Company Backend — Department Endpoint Tests
============================================

What:  /api/department through the ASGI app against a real SQLite database.

What we test:
    ✅ Create then list contains the submitted name
    ✅ Finance → Finance2 → deleted round trip
    ✅ Update/delete of unknown ids succeed and change nothing
    ✅ Delete is idempotent
    ✅ Duplicate names are allowed, also when created concurrently
    ✅ Store failure → 500 with a plain-text body
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from company_backend.database import get_db_session


async def _names(client):
    response = await client.get("/api/department")
    assert response.status_code == 200
    return [d["DepartmentName"] for d in response.json()]


class TestDepartmentEndpoints:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/department")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_then_list(self, test_client):
        response = await test_client.post("/api/department", json={"DepartmentName": "IT"})

        assert response.status_code == 200
        assert response.text == "Added Successfully"
        assert response.headers["content-type"].startswith("text/plain")

        listing = (await test_client.get("/api/department")).json()
        assert len(listing) == 1
        assert listing[0]["DepartmentName"] == "IT"
        assert isinstance(listing[0]["DepartmentId"], int)

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored_on_create(self, test_client):
        await test_client.post("/api/department", json={"DepartmentId": 500, "DepartmentName": "HR"})

        listing = (await test_client.get("/api/department")).json()
        assert listing[0]["DepartmentId"] != 500

    @pytest.mark.asyncio
    async def test_finance_round_trip(self, test_client):
        await test_client.post("/api/department", json={"DepartmentName": "Finance"})

        listing = (await test_client.get("/api/department")).json()
        finance = [d for d in listing if d["DepartmentName"] == "Finance"]
        assert len(finance) == 1
        finance_id = finance[0]["DepartmentId"]

        response = await test_client.put(
            "/api/department",
            json={"DepartmentId": finance_id, "DepartmentName": "Finance2"},
        )
        assert response.status_code == 200
        assert response.text == "Updated Successfully"

        names = await _names(test_client)
        assert "Finance" not in names
        assert "Finance2" in names

        response = await test_client.delete(f"/api/department/{finance_id}")
        assert response.status_code == 200
        assert response.text == "Deleted Successfully"

        assert "Finance2" not in await _names(test_client)

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_a_silent_success(self, test_client):
        await test_client.post("/api/department", json={"DepartmentName": "Sales"})
        before = (await test_client.get("/api/department")).json()

        response = await test_client.put(
            "/api/department", json={"DepartmentId": 987654, "DepartmentName": "Ghost"}
        )

        assert response.status_code == 200
        assert response.text == "Updated Successfully"
        assert (await test_client.get("/api/department")).json() == before

    @pytest.mark.asyncio
    async def test_update_requires_id(self, test_client):
        response = await test_client.put("/api/department", json={"DepartmentName": "NoId"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client):
        await test_client.post("/api/department", json={"DepartmentName": "Legal"})
        legal_id = (await test_client.get("/api/department")).json()[0]["DepartmentId"]

        first = await test_client.delete(f"/api/department/{legal_id}")
        second = await test_client.delete(f"/api/department/{legal_id}")
        unknown = await test_client.delete("/api/department/424242")

        for response in (first, second, unknown):
            assert response.status_code == 200
            assert response.text == "Deleted Successfully"
        assert await _names(test_client) == []

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_names_both_stored(self, test_client):
        responses = await asyncio.gather(
            test_client.post("/api/department", json={"DepartmentName": "Ops"}),
            test_client.post("/api/department", json={"DepartmentName": "Ops"}),
        )

        assert all(r.status_code == 200 for r in responses)
        assert (await _names(test_client)).count("Ops") == 2

    @pytest.mark.asyncio
    async def test_store_failure_returns_plain_500(self, test_client):
        from company_backend.main import app

        session = AsyncMock()
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("server has gone away"))
        )

        async def broken_session():
            yield session

        app.dependency_overrides[get_db_session] = broken_session

        response = await test_client.get("/api/department")

        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        assert response.headers["content-type"].startswith("text/plain")
