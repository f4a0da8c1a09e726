"""Shared fixtures for the perfpages test suite."""
from __future__ import annotations

import os
from unittest.mock import MagicMock

# Set up the test environment before the app module is imported
os.environ.setdefault("PERFPAGES_SKIP_MODULE_APP", "1")
os.environ.setdefault("SESSION_SECRET", "test-secret-key")
os.environ.setdefault("TESTING", "True")

import pytest  # noqa: E402

from app import create_app  # noqa: E402
from database import db  # noqa: E402
from db_config import DatabaseConfig  # noqa: E402
from tests.page_stubs import StubPageService  # noqa: E402

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
}


@pytest.fixture()
def page_service():
    """Stub page service injected into the app."""
    return StubPageService()


@pytest.fixture()
def diagnostic_sink():
    """Mock sink that receives hit update failures."""
    return MagicMock(name="diagnostic_sink")


@pytest.fixture()
def app(page_service, diagnostic_sink):
    """Flask app wired to the stub page service."""
    flask_app = create_app(
        dict(TEST_CONFIG),
        page_service=page_service,
        diagnostic_sink=diagnostic_sink,
    )

    with flask_app.app_context():
        yield flask_app
        db.session.remove()
        db.drop_all()

    DatabaseConfig.reset()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_app():
    """Flask app using the database-backed page service and default sink."""
    flask_app = create_app(dict(TEST_CONFIG))

    with flask_app.app_context():
        yield flask_app
        db.session.remove()
        db.drop_all()

    DatabaseConfig.reset()


@pytest.fixture()
def db_client(db_app):
    return db_app.test_client()
