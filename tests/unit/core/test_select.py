"""Unit tests for projection strings."""

from src.registry.core.constants import SelectType
from src.registry.core.helpers import (
    SelectMeta,
    SelectMetas,
    get_clean_object,
    get_select_string,
    parse_select_string,
)


class TestGetSelectString:
    def test_no_metas_selects_everything(self):
        assert get_select_string() == ""

    def test_deselect_fields_are_prefixed(self):
        assert (
            get_select_string(SelectMetas.DEFAULT, SelectMetas.USERS)
            == "-createdBy -createdAt -updatedBy -updatedAt -password"
        )

    def test_select_fields_are_space_joined(self):
        meta = SelectMeta(type=SelectType.SELECT, fields=("fullName", "email"))

        assert get_select_string(meta) == "fullName email"

    def test_first_meta_decides_mode(self):
        select = SelectMeta(type=SelectType.SELECT, fields=("email",))

        assert get_select_string(select, SelectMetas.USERS) == "email password"


class TestProjection:
    document = {
        "_id": "u1",
        "fullName": "Jane",
        "email": "jane@registry.test",
        "password": "secret",
        "createdBy": "system",
    }

    def test_exclusion(self):
        projection = parse_select_string("-password -createdBy")

        assert projection.apply(self.document) == {
            "_id": "u1",
            "fullName": "Jane",
            "email": "jane@registry.test",
        }

    def test_inclusion_keeps_id(self):
        projection = parse_select_string("email")

        assert projection.apply(self.document) == {
            "_id": "u1",
            "email": "jane@registry.test",
        }

    def test_inclusion_can_drop_id(self):
        projection = parse_select_string("email -_id")

        assert projection.apply(self.document) == {"email": "jane@registry.test"}

    def test_empty_string_keeps_everything(self):
        assert parse_select_string(None).apply(self.document) == self.document
        assert parse_select_string("").apply(self.document) == self.document


class TestGetCleanObject:
    def test_removes_deselected_fields(self):
        document = {
            "_id": "u1",
            "email": "jane@registry.test",
            "password": "secret",
            "createdAt": "2024-01-01T00:00:00",
            "updatedBy": None,
        }

        clean = get_clean_object(document, SelectMetas.DEFAULT, SelectMetas.USERS)

        assert clean == {"_id": "u1", "email": "jane@registry.test"}
        assert "password" in document

    def test_select_metas_remove_nothing(self):
        meta = SelectMeta(type=SelectType.SELECT, fields=("email",))

        assert get_clean_object({"email": "a", "x": 1}, meta) == {"email": "a", "x": 1}
