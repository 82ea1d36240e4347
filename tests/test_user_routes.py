"""HTTP status codes and envelopes of the /api/users endpoints."""

import pytest

from status_api.main import create_app
from status_api.repositories.user_repository import InMemoryUserRepository


# -------------------------
# GET /api/users
# -------------------------

def test_list_users_returns_seed_data(client, auth):
    resp = client.get("/api/users", headers=auth)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Users retrieved successfully"
    assert body["errors"] is None
    assert [u["id"] for u in body["data"]] == [1, 2]


def test_list_users_serializes_camel_case(client, auth):
    user = client.get("/api/users", headers=auth).get_json()["data"][0]

    assert set(user) == {
        "id",
        "email",
        "firstName",
        "lastName",
        "age",
        "createdAt",
        "updatedAt",
        "isActive",
        "isSystemAccount",
    }
    assert user["firstName"] == "John"
    assert user["updatedAt"] is None


def test_list_users_hides_soft_deleted(client, auth):
    assert client.delete("/api/users/2", headers=auth).status_code == 204

    resp = client.get("/api/users", headers=auth)
    assert [u["id"] for u in resp.get_json()["data"]] == [1]


# -------------------------
# GET /api/users/<id>
# -------------------------

def test_get_user(client, auth):
    resp = client.get("/api/users/1", headers=auth)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "User retrieved successfully"
    assert body["data"]["email"] == "john.doe@example.com"


@pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
@pytest.mark.parametrize("user_id", [0, -1])
def test_non_positive_id_is_bad_request_everywhere(client, auth, method, user_id, new_user):
    kwargs = {"headers": auth}
    if method in ("put", "patch"):
        kwargs["json"] = new_user

    resp = getattr(client, method)(f"/api/users/{user_id}", **kwargs)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Invalid user ID"
    assert body["errors"] == ["User ID must be a positive integer"]


def test_missing_user_is_not_found(client, auth):
    resp = client.get("/api/users/99", headers=auth)

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["message"] == "User not found"
    assert body["errors"] == ["User with ID 99 does not exist"]
    assert body["data"] is None


def test_id_one_without_user_is_not_found_not_bad_request(settings, auth):
    empty = create_app(settings, repository=InMemoryUserRepository())
    with empty.test_client() as c:
        assert c.get("/api/users/1", headers=auth).status_code == 404


def test_non_integer_id_does_not_match_route(client, auth):
    resp = client.get("/api/users/abc", headers=auth)

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


# -------------------------
# POST /api/users
# -------------------------

def test_create_user(client, auth, new_user):
    resp = client.post("/api/users", json=new_user, headers=auth)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "User created successfully"
    assert body["data"]["id"] == 3
    assert body["data"]["isActive"] is True
    assert resp.headers["Location"] == "http://localhost/api/users/3"

    fetched = client.get(resp.headers["Location"], headers=auth)
    assert fetched.status_code == 200
    assert fetched.get_json()["data"]["email"] == "a@x.com"


def test_create_without_body_is_bad_request(client, auth):
    resp = client.post("/api/users", headers=auth)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["User data is required"]


def test_create_with_json_null_is_bad_request(client, auth):
    resp = client.post("/api/users", data="null", content_type="application/json", headers=auth)

    assert resp.status_code == 400


def test_create_with_malformed_json_is_bad_request(client, auth):
    resp = client.post("/api/users", data="{not json", content_type="application/json", headers=auth)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid request data"


def test_create_with_non_json_content_type_is_unsupported(client, auth):
    resp = client.post("/api/users", data="email=a@x.com", content_type="text/plain", headers=auth)

    assert resp.status_code == 415
    assert resp.get_json()["success"] is False


def test_create_validation_failure(client, auth):
    resp = client.post(
        "/api/users",
        json={"email": "nope", "firstName": "A", "lastName": "Lee", "age": 12},
        headers=auth,
    )

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["message"] == "Validation failed"
    assert body["errors"] == [
        "Invalid email format",
        "First name must be between 2 and 100 characters",
        "Age must be between 18 and 120",
    ]


def test_create_duplicate_email_conflicts(client, auth, new_user):
    assert client.post("/api/users", json=new_user, headers=auth).status_code == 201

    resp = client.post("/api/users", json=new_user, headers=auth)
    assert resp.status_code == 409
    assert resp.get_json()["message"] == "Email already exists"


def test_create_with_differently_cased_email_is_allowed(client, auth, new_user):
    resp = client.post("/api/users", json={**new_user, "email": "John.Doe@example.com"}, headers=auth)

    assert resp.status_code == 201


# -------------------------
# PUT /api/users/<id>
# -------------------------

def test_update_user(client, auth, new_user):
    before = client.get("/api/users/1", headers=auth).get_json()["data"]

    resp = client.put("/api/users/1", json=new_user, headers=auth)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert (data["email"], data["firstName"], data["lastName"], data["age"]) == (
        "a@x.com",
        "Ann",
        "Lee",
        30,
    )
    assert data["createdAt"] == before["createdAt"]
    assert data["updatedAt"] is not None

    again = client.get("/api/users/1", headers=auth).get_json()["data"]
    assert again == data


def test_update_without_body_is_bad_request(client, auth):
    resp = client.put("/api/users/1", headers=auth)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid request data"


def test_update_validation_failure(client, auth):
    resp = client.put("/api/users/1", json={"email": "x@y.com"}, headers=auth)

    assert resp.status_code == 422


def test_update_missing_user(client, auth, new_user):
    assert client.put("/api/users/99", json=new_user, headers=auth).status_code == 404


def test_update_conflict(client, auth, new_user):
    resp = client.put("/api/users/1", json={**new_user, "email": "jane.smith@example.com"}, headers=auth)

    assert resp.status_code == 409
    assert resp.get_json()["errors"] == [
        "Another user with email 'jane.smith@example.com' already exists"
    ]


# -------------------------
# PATCH /api/users/<id>
# -------------------------

def test_patch_with_no_fields_is_no_content(client, auth):
    before = client.get("/api/users/1", headers=auth).get_json()["data"]

    resp = client.patch("/api/users/1", json={}, headers=auth)

    assert resp.status_code == 204
    assert resp.data == b""

    after = client.get("/api/users/1", headers=auth).get_json()["data"]
    assert after["updatedAt"] is not None
    assert {k: v for k, v in after.items() if k != "updatedAt"} == {
        k: v for k, v in before.items() if k != "updatedAt"
    }


def test_patch_partial_update(client, auth):
    resp = client.patch("/api/users/1", json={"age": 45}, headers=auth)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["age"] == 45
    assert data["firstName"] == "John"


def test_patch_without_body_is_bad_request(client, auth):
    resp = client.patch("/api/users/1", headers=auth)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Patch data is required"]


def test_patch_validation_failure(client, auth):
    resp = client.patch("/api/users/1", json={"lastName": "X"}, headers=auth)

    assert resp.status_code == 422
    assert resp.get_json()["errors"] == ["Last name must be between 2 and 100 characters"]


def test_patch_missing_user(client, auth):
    assert client.patch("/api/users/99", json={"age": 40}, headers=auth).status_code == 404


def test_patch_email_conflict(client, auth):
    resp = client.patch("/api/users/2", json={"email": "john.doe@example.com"}, headers=auth)

    assert resp.status_code == 409


def test_patch_deactivating_hides_user(client, auth):
    assert client.patch("/api/users/1", json={"isActive": False}, headers=auth).status_code == 200

    assert client.get("/api/users/1", headers=auth).status_code == 404


# -------------------------
# DELETE /api/users/<id>
# -------------------------

def test_delete_system_account_is_no_content(client, auth):
    resp = client.delete("/api/users/2", headers=auth)

    assert resp.status_code == 204
    assert resp.data == b""
    assert client.get("/api/users/2", headers=auth).status_code == 404


def test_delete_regular_account_is_forbidden(client, auth):
    # inverted policy kept as-is: non-system accounts are protected
    resp = client.delete("/api/users/1", headers=auth)

    assert resp.status_code == 403
    body = resp.get_json()
    assert body["message"] == "Operation not permitted"
    assert client.get("/api/users/1", headers=auth).status_code == 200


def test_delete_missing_user(client, auth):
    assert client.delete("/api/users/99", headers=auth).status_code == 404


def test_delete_then_delete_again_is_not_found(client, auth):
    assert client.delete("/api/users/2", headers=auth).status_code == 204
    assert client.delete("/api/users/2", headers=auth).status_code == 404


def test_email_of_deleted_user_can_be_reused(client, auth, new_user):
    assert client.delete("/api/users/2", headers=auth).status_code == 204

    resp = client.post("/api/users", json={**new_user, "email": "jane.smith@example.com"}, headers=auth)
    assert resp.status_code == 201
    assert resp.get_json()["data"]["id"] == 3


def test_unsupported_method(client, auth):
    resp = client.post("/api/users/1", json={}, headers=auth)

    assert resp.status_code == 405
    assert "PUT" in resp.headers["Allow"]


@pytest.mark.parametrize("email", ["admin@localhost", "john@company", "a@x.test", "user@intranet.local"])
def test_create_accepts_intranet_style_emails(client, auth, new_user, email):
    resp = client.post("/api/users", json={**new_user, "email": email}, headers=auth)

    assert resp.status_code == 201
    assert resp.get_json()["data"]["email"] == email
