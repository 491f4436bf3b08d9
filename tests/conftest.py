"""Shared fixtures: an application built with test settings and a client for it."""

import pytest
from fastapi.testclient import TestClient

from coaster_api.app.core.config import Settings
from coaster_api.app.main import create_app
from coaster_api.app.services.coaster_store import CoasterStore


ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def settings():
    return Settings(admin_password=ADMIN_PASSWORD)


@pytest.fixture
def store():
    return CoasterStore()


@pytest.fixture
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_coaster():
    """A valid coaster payload."""
    return {
        "name": "Taron",
        "inPark": "Phantasialand",
        "manufacturer": "Intamin",
        "height": 30,
    }
