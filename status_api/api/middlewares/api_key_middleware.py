# status_api/api/middlewares/api_key_middleware.py
import logging
import secrets

from flask import Flask, request

from status_api.config.settings import Settings
from status_api.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def _is_exempt(path: str, settings: Settings) -> bool:
    if settings.docs_path_prefix and (
        path == settings.docs_path_prefix or path.startswith(settings.docs_path_prefix.rstrip("/") + "/")
    ):
        return True
    return path == settings.health_path or path.startswith(settings.health_path.rstrip("/") + "/")


def register_api_key_check(app: Flask, settings: Settings) -> None:
    """Require the shared-secret header on every request except docs/health."""

    @app.before_request
    def check_api_key():
        # preflight do CORS não carrega o header
        if request.method == "OPTIONS" or _is_exempt(request.path, settings):
            return None

        provided = request.headers.get(settings.api_key_header)
        if provided is None:
            logger.warning("API key missing", extra={"path": request.path, "method": request.method})
            raise UnauthorizedError("API Key missing")

        if not secrets.compare_digest(provided.encode("utf-8"), settings.api_key.encode("utf-8")):
            logger.warning("Invalid API key", extra={"path": request.path, "method": request.method})
            raise UnauthorizedError("Invalid API Key")

        return None
