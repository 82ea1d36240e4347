from flask import Flask

from status_api.config.settings import Settings


def configure_app(app: Flask, settings: Settings) -> None:
    app.config["ENV"] = settings.environment
    app.config["DEBUG"] = settings.debug
    # respostas JSON na ordem declarada (envelope: success, message, data, errors)
    app.json.sort_keys = False
