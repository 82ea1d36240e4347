# status_api/api/routes/__init__.py

from flask import Flask

from status_api.api.routes.health_routes import bp_health
from status_api.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str, health_path: str) -> None:
    # health fora de /api
    app.register_blueprint(bp_health, url_prefix=health_path)

    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
