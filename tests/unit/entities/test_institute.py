"""Unit tests for the institute entity package."""

import pytest
from pydantic import ValidationError

from src.registry.entities import (
    InstituteFields,
    InstituteRepository,
    InstituteUpdate,
    UserRepository,
)
from src.registry.entities.core.repository import QueryOptions
from tests.fixtures.dummies import institute_payload, user_payload


def test_text_fields_are_stripped():
    fields = InstituteFields.model_validate({"location": "  Pune ", "description": " x "})

    assert fields.location == "Pune"
    assert fields.description == "x"


def test_location_required():
    with pytest.raises(ValidationError):
        InstituteFields.model_validate({"description": "x"})

def test_update_refuses_null_location():
    with pytest.raises(ValidationError):
        InstituteUpdate.model_validate({"location": None})

    cleared = InstituteUpdate.model_validate({"description": None})
    assert cleared.model_dump(exclude_unset=True) == {"description": None}


class TestInstituteRepository:
    @pytest.mark.asyncio
    async def test_add_without_admin(self, institute_repository: InstituteRepository):
        created = await institute_repository.add(institute_payload(), "system")

        assert created["location"] == "Pune"
        assert created["adminId"] is None
        assert "createdBy" not in created

    @pytest.mark.asyncio
    async def test_admin_is_populated_without_password(
        self,
        institute_repository: InstituteRepository,
        user_repository: UserRepository,
    ):
        admin = await user_repository.add(user_payload(userType="admin"), "system")
        created = await institute_repository.add(
            institute_payload(adminId=admin["_id"]), "system"
        )

        institute = await institute_repository.get_one(
            {"_id": created["_id"]}, QueryOptions(select="-createdBy")
        )

        assert institute["adminId"]["_id"] == admin["_id"]
        assert institute["adminId"]["email"] == "afwan@registry.test"
        assert "password" not in institute["adminId"]
        assert "createdAt" not in institute["adminId"]

    @pytest.mark.asyncio
    async def test_dangling_admin_reference(
        self, institute_repository: InstituteRepository
    ):
        created = await institute_repository.add(
            institute_payload(adminId="missing-user"), "system"
        )

        institutes = await institute_repository.get_many({"adminId": "missing-user"})

        assert [i["_id"] for i in institutes] == [created["_id"]]
        assert institutes[0]["adminId"] is None

    @pytest.mark.asyncio
    async def test_soft_delete_and_update(
        self, institute_repository: InstituteRepository
    ):
        created = await institute_repository.add(institute_payload(), "system")

        await institute_repository.update(created["_id"], {"location": " Mumbai "}, "a@b.c")
        deleted = await institute_repository.soft_delete(created["_id"])

        assert deleted["location"] == "Mumbai"
        assert deleted["recStatus"] == "inactive"
        assert await institute_repository.get_many({"recStatus": "active"}) == []
