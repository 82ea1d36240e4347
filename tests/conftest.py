"""Shared fixtures: a fresh app (seeded store, fresh limiter) per test."""

import pytest

from status_api.config.settings import Settings
from status_api.main import create_app

API_KEY = "test-api-key"


@pytest.fixture
def settings():
    return Settings(
        api_key=API_KEY,
        environment="test",
        debug=False,
        seed_demo_data=True,
        log_level="WARNING",
        log_format="text",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def auth():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def new_user():
    return {"email": "a@x.com", "firstName": "Ann", "lastName": "Lee", "age": 30}
