"""Shared fixtures: an app over a temporary data directory."""

import pytest
from fastapi.testclient import TestClient

from kmca_api.app.core.config import Settings
from kmca_api.app.core.store import CASES, CONTACT, get_store
from kmca_api.app.main import create_app

ADMIN_SECRET = "s3cret-admin"


@pytest.fixture
def settings(tmp_path):
    return Settings(admin_secret=ADMIN_SECRET, data_dir=tmp_path / "data")


@pytest.fixture
def client(settings):
    """Create a test client for an app using ``settings``."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers(settings):
    return {settings.admin_header: ADMIN_SECRET}


@pytest.fixture
def case_store(settings):
    return get_store(settings, CASES)


@pytest.fixture
def contact_store(settings):
    return get_store(settings, CONTACT)
