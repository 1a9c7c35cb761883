"""HTTP tests for the /institutes endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient

from src.registry.entities import InstituteRepository
from tests.fixtures.dummies import ADMIN_EMAIL, institute_payload


async def _create_institute(client: AsyncClient, auth_headers: dict[str, str], **overrides) -> dict:
    response = await client.put(
        "/institutes", json=institute_payload(**overrides), headers=auth_headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestAddInstitute:
    @pytest.mark.asyncio
    async def test_created(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        institute_repository: InstituteRepository,
    ):
        response = await client.put("/institutes", json=institute_payload(), headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Institute added successfully"
        assert body["data"]["location"] == "Pune"
        assert body["data"]["recStatus"] == "active"
        stored = await institute_repository.get_one({"_id": body["data"]["_id"]})
        assert stored["createdBy"] == ADMIN_EMAIL

    @pytest.mark.asyncio
    async def test_missing_location(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.put(
            "/institutes", json={"description": "x"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "status": 400,
            "message": "missing fields",
            "data": {"missingFields": ["location"]},
        }

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient):
        response = await client.put("/institutes", json=institute_payload())

        assert response.status_code == 401


class TestListInstitutes:
    @pytest.mark.asyncio
    async def test_admin_populated(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        admin_user: dict[str, Any],
    ):
        await _create_institute(client, auth_headers, adminId=admin_user["_id"])
        await _create_institute(client, auth_headers, location="Mumbai")

        response = await client.get(
            "/institutes", params={"admin": admin_user["_id"]}, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Institute data fetched successfully"
        assert len(body["data"]) == 1
        institute = body["data"][0]
        assert institute["adminId"]["email"] == ADMIN_EMAIL
        assert "password" not in institute["adminId"]
        assert "createdBy" not in institute

    @pytest.mark.asyncio
    async def test_deleted_hidden_by_default(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ):
        created = await _create_institute(client, auth_headers)
        await client.delete(f"/institutes/{created['_id']}", headers=auth_headers)

        active = await client.get("/institutes", headers=auth_headers)
        everything = await client.get(
            "/institutes", params={"status": "all"}, headers=auth_headers
        )

        assert active.json()["data"] == []
        assert [i["_id"] for i in everything.json()["data"]] == [created["_id"]]


class TestSingleInstitute:
    @pytest.mark.asyncio
    async def test_found(self, client: AsyncClient, auth_headers: dict[str, str]):
        created = await _create_institute(client, auth_headers)

        response = await client.get(f"/institutes/{created['_id']}", headers=auth_headers)

        body = response.json()
        assert body["message"] == "Single institute data fetched successfully"
        assert body["data"]["_id"] == created["_id"]

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.get("/institutes/i1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"status": 204, "message": "No records found"}


class TestDeleteInstitute:
    @pytest.mark.asyncio
    async def test_soft_delete(self, client: AsyncClient, auth_headers: dict[str, str]):
        created = await _create_institute(client, auth_headers)

        response = await client.delete(f"/institutes/{created['_id']}", headers=auth_headers)

        body = response.json()
        assert body["message"] == "Institute deleted successfully"
        assert body["data"]["recStatus"] == "inactive"
        single = await client.get(f"/institutes/{created['_id']}", headers=auth_headers)
        assert single.json()["data"]["recStatus"] == "inactive"


class TestUpdateInstitute:
    @pytest.mark.asyncio
    async def test_id_only_body_has_no_update_fields(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ):
        response = await client.post("/institutes", json={"_id": "i1"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"status": 400, "message": "no update fields"}

    @pytest.mark.asyncio
    async def test_update(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        institute_repository: InstituteRepository,
    ):
        created = await _create_institute(client, auth_headers)

        response = await client.post(
            "/institutes",
            json={"_id": created["_id"], "description": "Renamed"},
            headers=auth_headers,
        )

        assert response.json() == {"status": 200, "message": "Institute updated successfully"}
        stored = await institute_repository.get_one({"_id": created["_id"]})
        assert stored["description"] == "Renamed"
        assert stored["location"] == "Pune"
        assert stored["updatedBy"] == ADMIN_EMAIL

    @pytest.mark.asyncio
    async def test_null_location(self, client: AsyncClient, auth_headers: dict[str, str]):
        created = await _create_institute(client, auth_headers)

        response = await client.post(
            "/institutes",
            json={"_id": created["_id"], "location": None},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "invalid field values"
        assert response.json()["data"]["errors"][0]["field"] == "location"
