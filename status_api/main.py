# status_api/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from status_api.api.middlewares.api_key_middleware import register_api_key_check
from status_api.api.middlewares.error_handler import register_error_handlers
from status_api.api.middlewares.rate_limit import RATE_LIMITER_EXTENSION, FixedWindowRateLimiter
from status_api.api.routes import register_routes
from status_api.api.routes.user_routes import USER_REPOSITORY_EXTENSION
from status_api.config.flask_config import configure_app
from status_api.config.settings import Settings, settings as default_settings
from status_api.infrastructure.observability import setup_logging
from status_api.repositories.user_repository import InMemoryUserRepository, seed_demo_users

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    repository: InMemoryUserRepository | None = None,
    rate_limiter: FixedWindowRateLimiter | None = None,
) -> Flask:
    settings = settings or default_settings
    app = Flask(__name__)

    setup_logging(settings.log_level, settings.log_format)
    configure_app(app, settings)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type", settings.api_key_header],
        expose_headers=["Location", "Retry-After"],
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    )

    # ✅ um store por processo, injetado nas rotas via app.extensions
    if repository is None:
        repository = InMemoryUserRepository()
        if settings.seed_demo_data:
            seed_demo_users(repository)
    app.extensions[USER_REPOSITORY_EXTENSION] = repository

    app.extensions[RATE_LIMITER_EXTENSION] = rate_limiter or FixedWindowRateLimiter(
        settings.rate_limit_permit_limit,
        settings.rate_limit_window_seconds,
    )

    register_api_key_check(app, settings)
    register_routes(app, api_prefix=settings.api_prefix, health_path=settings.health_path)
    register_error_handlers(app)

    logger.info("User status-code API ready (environment=%s)", settings.environment)
    return app


app = create_app()

if __name__ == "__main__":
    app.run(host=default_settings.host, port=default_settings.port, debug=default_settings.debug)
