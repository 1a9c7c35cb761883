from src.registry.core.constants import Status
from src.registry.core.helpers import ApiResponse, response_structure


def test_envelope_without_data():
    assert response_structure(Status.BAD_REQUEST, "no update fields") == {
        "status": 400,
        "message": "no update fields",
    }


def test_envelope_with_data():
    body = response_structure(Status.SUCCESS, "ok", [])

    assert body == {"status": 200, "message": "ok", "data": []}
    assert type(body["status"]) is int


def test_envelope_matches_documented_model():
    body = response_structure(Status.CREATED, "created", {"_id": "u1"})

    assert ApiResponse.model_validate(body).data == {"_id": "u1"}
