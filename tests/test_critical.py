"""
Critical Integration Tests for Showcase
=======================================

Focused tests covering the integration points most likely to break.
Run with: pytest tests/ -v
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
from flask import Flask

from showcase import Showcase, create_app
from showcase.core import Config, ConfigurationError, Database, LoggingService, StoreError


# ---------------------------------------------------------------------------
# 1. Extension initialisation -- Showcase(app) stores itself on the app
# ---------------------------------------------------------------------------

def test_extension_initialisation(app, showcase):
    assert app.extensions["showcase"] is showcase
    assert showcase.db is not None
    assert os.path.isfile(app.config["SHOWCASE_DB"])


def test_create_app_factory(tmp_db_dir):
    app = create_app({
        "JWT_SECRET": "factory-secret",
        "SHOWCASE_DB": os.path.join(tmp_db_dir, "factory.db"),
    })
    try:
        assert "showcase" in app.extensions
        assert app.config["ADMIN_COOKIE_NAME"] == "admin-token"
    finally:
        app.extensions["showcase"].close()


def test_showcase_db_env_read_at_startup(tmp_db_dir, monkeypatch):
    target = os.path.join(tmp_db_dir, "from-env.db")
    monkeypatch.setenv("SHOWCASE_DB", target)

    app = create_app({"JWT_SECRET": "s"})
    try:
        assert app.config["SHOWCASE_DB"] == target
        assert os.path.isfile(target)
    finally:
        app.extensions["showcase"].close()


def test_db_dir_used_when_no_path_given(tmp_db_dir, monkeypatch):
    monkeypatch.delenv("SHOWCASE_DB", raising=False)
    target = os.path.join(tmp_db_dir, "sub", "databases")
    app = create_app({"JWT_SECRET": "s", "DB_DIR": target})
    try:
        assert app.config["SHOWCASE_DB"] == os.path.join(target, "showcase.db")
        assert os.path.isdir(target), f"DB_DIR was not created at {target}"
    finally:
        app.extensions["showcase"].close()


# ---------------------------------------------------------------------------
# 2. Fail fast -- a missing signing secret stops startup
# ---------------------------------------------------------------------------

def test_missing_jwt_secret_fails_fast(tmp_db_dir, monkeypatch):
    monkeypatch.setattr(Config, "JWT_SECRET", None)
    app = Flask(__name__)
    app.config["SHOWCASE_DB"] = os.path.join(tmp_db_dir, "showcase.db")

    with pytest.raises(ConfigurationError) as exc:
        Showcase(app)

    assert "JWT_SECRET" in str(exc.value)
    assert "showcase" not in app.extensions


# ---------------------------------------------------------------------------
# 3. Routes -- every endpoint of the JSON API is registered
# ---------------------------------------------------------------------------

EXPECTED_ROUTES = {
    ("/auth/login", "POST"),
    ("/auth/logout", "POST"),
    ("/auth/verify", "GET"),
    ("/projects", "GET"),
    ("/projects", "POST"),
    ("/projects/<project_id>", "GET"),
    ("/projects/<project_id>", "PUT"),
    ("/projects/<project_id>", "DELETE"),
    ("/health", "GET"),
}


def test_all_routes_registered(app):
    registered = {
        (rule.rule, method)
        for rule in app.url_map.iter_rules()
        for method in rule.methods
    }
    missing = EXPECTED_ROUTES - registered
    assert not missing, f"Routes not registered: {sorted(missing)}"


# ---------------------------------------------------------------------------
# 4. Health endpoint
# ---------------------------------------------------------------------------

def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert data["checks"]["database"]["ok"] is True
    assert data["checks"]["database"]["projects"] == 0


def test_health_reports_closed_store(client, showcase):
    showcase.close()
    response = client.get("/health")
    assert response.status_code == 503
    assert response.get_json()["status"] == "critical"


# ---------------------------------------------------------------------------
# 5. Store handle lifecycle
# ---------------------------------------------------------------------------

def test_closed_database_raises_store_error(tmp_db_dir):
    db = Database(os.path.join(tmp_db_dir, "lifecycle.db"))
    db.init_schema()
    assert db.ping() is True

    db.close()

    assert db.closed
    assert db.ping() is False
    with pytest.raises(StoreError):
        with db.connection():
            pass


def test_init_schema_is_idempotent(showcase):
    showcase.db.init_schema()
    showcase.db.init_schema()
    assert showcase.projects.count_projects() == 0


def _insert_log(db, timestamp, message):
    with db.connection() as conn:
        conn.execute(
            f"INSERT INTO {Config.LOGS_TABLE} (timestamp, level, source, message) VALUES (?, ?, ?, ?)",
            (timestamp, "WARNING", "security", message),
        )


def _log_messages(db):
    with db.connection() as conn:
        return [row["message"] for row in conn.execute(f"SELECT message FROM {Config.LOGS_TABLE} ORDER BY id")]


def test_old_logs_pruned_at_startup(tmp_db_dir):
    path = os.path.join(tmp_db_dir, "logs.db")
    now = datetime.now(timezone.utc)
    db = Database(path)
    db.init_schema()
    _insert_log(db, (now - timedelta(days=45)).isoformat(timespec="microseconds"), "stale")
    _insert_log(db, (now - timedelta(days=1)).isoformat(timespec="microseconds"), "recent")
    db.close()

    app = create_app({"JWT_SECRET": "s", "SHOWCASE_DB": path, "LOG_RETENTION_DAYS": 30})
    try:
        assert _log_messages(app.extensions["showcase"].db) == ["recent"]
    finally:
        app.extensions["showcase"].close()


def test_cleanup_old_logs_keeps_newest_rows(showcase):
    now = datetime.now(timezone.utc).isoformat(timespec="microseconds")
    for i in range(5):
        _insert_log(showcase.db, now, f"entry-{i}")

    deleted = LoggingService.cleanup_old_logs(30, max_rows=2, db=showcase.db)

    assert deleted == 3
    assert _log_messages(showcase.db) == ["entry-3", "entry-4"]


# ---------------------------------------------------------------------------
# 6. Store failures become a generic 500
# ---------------------------------------------------------------------------

def test_store_failure_returns_generic_500(client, showcase):
    showcase.close()
    response = client.get("/projects")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}


# ---------------------------------------------------------------------------
# 7. CORS -- configured origins may call the API with credentials
# ---------------------------------------------------------------------------

def test_cors_for_configured_origin(tmp_db_dir):
    app = create_app({
        "JWT_SECRET": "s",
        "SHOWCASE_DB": os.path.join(tmp_db_dir, "cors.db"),
        "CORS_ORIGINS": "http://localhost:3000",
    })
    try:
        response = app.test_client().get("/projects", headers={"Origin": "http://localhost:3000"})
        assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
        assert response.headers.get("Access-Control-Allow-Credentials") == "true"

        other = app.test_client().get("/projects", headers={"Origin": "http://evil.example"})
        assert "Access-Control-Allow-Origin" not in other.headers
    finally:
        app.extensions["showcase"].close()
