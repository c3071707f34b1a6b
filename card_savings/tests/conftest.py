from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from card_savings.app import create_app
from card_savings.config import reload_config
from card_savings.core.theme import InMemoryStore


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for key in (
        "CALC_MODE",
        "CALC_TRANSPARENT_BACKGROUND",
        "CALC_DEFAULT_TIME_PERIOD",
        "CALC_DEFAULT_RETURN_RATE",
        "CALC_APR_CEILING",
        "CALC_VERSION",
        "CALC_SOURCE",
        "CALC_CORS_ORIGINS",
    ):
        monkeypatch.delenv(key, raising=False)
    reload_config()
    yield
    reload_config()


@pytest.fixture()
def theme_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def client(theme_store) -> FlaskClient:
    app = create_app(theme_store=theme_store)
    with app.test_client() as test_client:
        yield test_client
