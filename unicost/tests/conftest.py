from __future__ import annotations

from datetime import date, datetime

import pytest
from flask.testing import FlaskClient

from unicost.app import create_app
from unicost.core.reference import DEFAULT_CONFIG
from unicost.schemas.report import Subject


@pytest.fixture()
def app():
    flask_app = create_app(DEFAULT_CONFIG)
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 1, 1)


@pytest.fixture()
def subject() -> Subject:
    # exactly 8 average years (2922 days) before 2024-01-01
    return Subject(name="Ada", date_of_birth=date(2016, 1, 1))
