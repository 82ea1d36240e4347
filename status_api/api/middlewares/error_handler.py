# status_api/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from status_api.api.schemas.response_schema import envelope
from status_api.core.exceptions import AppError, RateLimitedError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"

# mensagem fixa por endpoint, nunca o detalhe da exceção
_INTERNAL_ERROR_DETAILS = {
    "users.list_users": "Unable to retrieve users at this time",
    "users.get_user": "Unable to retrieve user at this time",
    "users.create_user": "Unable to create user at this time",
    "users.update_user": "Unable to update user at this time",
    "users.patch_user": "Unable to update user at this time",
    "users.delete_user": "Unable to delete user at this time",
}
_DEFAULT_INTERNAL_ERROR_DETAIL = "Unable to process the request at this time"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        response = jsonify(envelope(err.message, errors=err.errors, success=False))
        response.status_code = err.status_code
        if isinstance(err, RateLimitedError) and err.retry_after is not None:
            response.headers["Retry-After"] = str(err.retry_after)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        response = jsonify(envelope(err.name, errors=[err.description], success=False))
        response.status_code = err.code or 500
        valid_methods = getattr(err, "valid_methods", None)
        if valid_methods:
            response.headers["Allow"] = ", ".join(valid_methods)
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        view_args = request.view_args or {}
        logger.error(
            "Unhandled exception on %s",
            request.path,
            exc_info=err,
            extra={
                "path": request.path,
                "method": request.method,
                "endpoint": request.endpoint,
                "user_id": view_args.get("user_id"),
            },
        )
        detail = _INTERNAL_ERROR_DETAILS.get(request.endpoint or "", _DEFAULT_INTERNAL_ERROR_DETAIL)
        return jsonify(envelope(INTERNAL_ERROR_MESSAGE, errors=[detail], success=False)), 500
