# status_api/api/schemas/response_schema.py
from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Any = None
    errors: list[str] | None = None


def envelope(
    message: str,
    *,
    data: Any = None,
    errors: list[str] | None = None,
    success: bool = True,
) -> dict:
    return ApiResponse(success=success, message=message, data=data, errors=errors).model_dump(mode="json")
