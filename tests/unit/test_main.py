"""Tests for main application entry point."""

from fastapi.testclient import TestClient


def test_main_app_exists():
    """Test that main module exports app."""
    from fitness_tracker.main import app

    assert app is not None
    assert hasattr(app, "routes")


def test_root_endpoint():
    from fitness_tracker import __version__
    from fitness_tracker.main import app

    response = TestClient(app).get("/")

    assert response.status_code == 200
    assert response.json()["version"] == __version__
    assert response.json()["message"] == "Fitness Tracker"
