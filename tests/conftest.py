"""
Shared fixtures for the Showcase test suite.

NOTE: pytest is listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile

import pytest
from flask import Flask

from showcase import Showcase

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Correct-Horse-9"


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="showcase-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_db_dir):
    """Flask app with Showcase initialised over a throwaway database."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["JWT_SECRET"] = "test-jwt-secret"
    app.config["IS_PRODUCTION"] = False
    app.config["SHOWCASE_DB"] = os.path.join(tmp_db_dir, "showcase.db")
    showcase = Showcase(app)
    yield app
    showcase.close()


@pytest.fixture
def showcase(app):
    return app.extensions["showcase"]


@pytest.fixture
def admin(showcase):
    """Provision one admin account and return its credentials."""
    admin_id = showcase.admins.create_admin(ADMIN_USERNAME, ADMIN_PASSWORD)
    return {"id": admin_id, "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client, admin):
    """Test client holding a valid session cookie."""
    response = client.post("/auth/login", json={
        "username": admin["username"],
        "password": admin["password"],
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_project():
    return {
        "title": "A",
        "description": "d",
        "image": "http://x/img.png",
        "link": "https://example.com/a",
        "tech": ["Go"],
    }
