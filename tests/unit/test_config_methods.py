"""Tests for Settings defaults, overrides and helper methods."""

from unittest.mock import patch

from fitness_tracker.config import Settings, get_settings


def test_defaults():
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.project_name == "Fitness Tracker"
    assert settings.storage_provider == "memory"
    assert settings.storage_base_dir == "./.fitness_data"
    assert settings.port == 8000
    assert settings.enable_docs is False


def test_env_overrides_storage():
    env = {"STORAGE_PROVIDER": "local", "STORAGE_BASE_DIR": "/tmp/fitness"}
    with patch.dict("os.environ", env):
        settings = Settings(_env_file=None)

    assert settings.storage_provider == "local"
    assert settings.storage_base_dir == "/tmp/fitness"


def test_env_names_are_case_insensitive():
    with patch.dict("os.environ", {"log_level": "debug"}):
        settings = Settings(_env_file=None)

    assert settings.log_level == "debug"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_get_allowed_origins_strips_spaces():
    with patch.dict(
        "os.environ", {"ALLOWED_ORIGINS": "http://a.test, http://b.test"}
    ):
        settings = Settings(_env_file=None)

    assert settings.get_allowed_origins() == ["http://a.test", "http://b.test"]


def test_get_cors_allowed_methods_wildcard():
    """Test CORS methods returns wildcard list when set to '*'."""
    with patch.dict("os.environ", {"CORS_ALLOWED_METHODS": "*"}):
        settings = Settings(_env_file=None)
        assert settings.get_cors_allowed_methods() == ["*"]


def test_get_cors_allowed_methods_default_list():
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.get_cors_allowed_methods() == [
        "GET",
        "POST",
        "PUT",
        "DELETE",
        "OPTIONS",
    ]


def test_get_cors_allowed_headers_list():
    """Test CORS headers returns parsed list."""
    with patch.dict(
        "os.environ", {"CORS_ALLOWED_HEADERS": "Authorization, Content-Type"}
    ):
        settings = Settings(_env_file=None)
        assert settings.get_cors_allowed_headers() == [
            "Authorization",
            "Content-Type",
        ]
