# status_api/api/request_parsing.py
from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from status_api.core.exceptions import BadRequestError, UnsupportedMediaTypeError

TRequest = TypeVar("TRequest", bound=BaseModel)

INVALID_DATA = "Invalid request data"
USER_DATA_REQUIRED = "User data is required"
PATCH_DATA_REQUIRED = "Patch data is required"


def require_positive_id(user_id: int) -> None:
    if user_id <= 0:
        raise BadRequestError("Invalid user ID", ["User ID must be a positive integer"])


def _json_body():
    # corpo presente com Content-Type que não é JSON -> 415
    if request.content_length and not request.is_json:
        raise UnsupportedMediaTypeError(
            "Unsupported media type",
            ["Content-Type must be application/json"],
        )
    return request.get_json(silent=True)


def parse_json_body(model: type[TRequest], missing_message: str) -> TRequest:
    """Read the JSON body into ``model``.

    A missing, unreadable or non-object body and fields of the wrong JSON
    type are all reported as 400; absent fields are left to validation.
    """
    payload = _json_body()
    if not isinstance(payload, dict):
        raise BadRequestError(INVALID_DATA, [missing_message])
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(
            INVALID_DATA,
            [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ],
        ) from exc
