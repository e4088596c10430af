# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient bound to the application
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app, create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient for the default application (runs startup/shutdown)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def static_dir(tmp_path):
    """Temporary static directory with a landing page and one asset."""
    (tmp_path / "index.html").write_text("<h1>Test landing page</h1>", encoding="utf-8")
    (tmp_path / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def static_client(static_dir):
    """TestClient for an application serving the temporary static directory."""
    test_settings = Settings(_env_file=None, STATIC_DIR=static_dir)
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def post_calculation(client):
    """POST a JSON payload to /calculate."""
    def _post(payload):
        return client.post("/calculate", json=payload)
    return _post
