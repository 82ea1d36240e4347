# status_api/api/routes/user_routes.py

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, url_for

from status_api.api.middlewares.rate_limit import rate_limited
from status_api.api.request_parsing import (
    PATCH_DATA_REQUIRED,
    USER_DATA_REQUIRED,
    parse_json_body,
    require_positive_id,
)
from status_api.api.schemas.response_schema import envelope
from status_api.api.schemas.user_schema import UserPatchRequest, UserRequest, UserResponse
from status_api.repositories.user_repository import InMemoryUserRepository
from status_api.services.user_service import UserService

USER_REPOSITORY_EXTENSION = "user_repository"

bp_users = Blueprint("users", __name__, url_prefix="/users")


# -------------------------
# Helpers
# -------------------------

def _build_service() -> UserService:
    repository: InMemoryUserRepository = current_app.extensions[USER_REPOSITORY_EXTENSION]
    return UserService(repository)


# -------------------------
# Leitura
# -------------------------

@bp_users.get("")
@rate_limited("fixed-rate-limit")
def list_users():
    users = _build_service().list_users()

    return jsonify(
        envelope(
            "Users retrieved successfully",
            data=[UserResponse.from_entity(u) for u in users],
        )
    ), 200


@bp_users.get("/<int(signed=True):user_id>")
def get_user(user_id: int):
    require_positive_id(user_id)

    user = _build_service().get_user(user_id)

    return jsonify(envelope("User retrieved successfully", data=UserResponse.from_entity(user))), 200


# -------------------------
# Escrita
# -------------------------

@bp_users.post("")
def create_user():
    payload = parse_json_body(UserRequest, USER_DATA_REQUIRED)

    created = _build_service().create_user(payload.to_entity())

    response = jsonify(envelope("User created successfully", data=UserResponse.from_entity(created)))
    response.status_code = 201
    response.headers["Location"] = url_for("users.get_user", user_id=created.id, _external=True)
    return response


@bp_users.put("/<int(signed=True):user_id>")
def update_user(user_id: int):
    require_positive_id(user_id)
    payload = parse_json_body(UserRequest, USER_DATA_REQUIRED)

    updated = _build_service().update_user(user_id, payload.to_entity())

    return jsonify(envelope("User updated successfully", data=UserResponse.from_entity(updated))), 200


@bp_users.patch("/<int(signed=True):user_id>")
def patch_user(user_id: int):
    require_positive_id(user_id)
    payload = parse_json_body(UserPatchRequest, PATCH_DATA_REQUIRED)

    updated = _build_service().patch_user(user_id, payload.to_patch())

    if updated is None:
        return ("", 204)

    return jsonify(envelope("User updated successfully", data=UserResponse.from_entity(updated))), 200


@bp_users.delete("/<int(signed=True):user_id>")
def delete_user(user_id: int):
    require_positive_id(user_id)

    _build_service().delete_user(user_id)

    return ("", 204)
