"""Global pytest configuration and fixtures for all tests."""

import os
from datetime import date

import pytest
from fastapi.testclient import TestClient

from fitness_tracker.application import create_app
from fitness_tracker.domain.entities import User
from fitness_tracker.infrastructure import InfrastructureFactory


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Keeps every test on process-local storage with docs disabled.
    """
    # Store original values to restore after tests
    original_env = {}

    test_env_vars = {
        "ENABLE_DOCS": "false",  # Keep docs disabled in tests
        "STORAGE_PROVIDER": "memory",
        "LOG_LEVEL": "INFO",
    }

    # Set test environment variables
    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    # Restore original environment after all tests
    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture
def memory_factory():
    """Fresh in-memory infrastructure for one test."""
    return InfrastructureFactory(provider="memory")


@pytest.fixture
def client(memory_factory):
    """Test client backed by an isolated in-memory store."""
    app = create_app(infrastructure_factory=memory_factory)
    return TestClient(app)


@pytest.fixture
def john():
    """A valid, not yet persisted user."""
    return User(
        first_name="John",
        last_name="Doe",
        birthdate=date(1985, 5, 15),
        email="john.doe@example.com",
    )


@pytest.fixture
def jane():
    """A second valid, not yet persisted user."""
    return User(
        first_name="Jane",
        last_name="Smith",
        birthdate=date(1990, 7, 20),
        email="jane.smith@example.com",
    )
