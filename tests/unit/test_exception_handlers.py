"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError

from fitness_tracker.domain.exceptions import (
    ConflictError,
    FitnessTrackerError,
    InvalidArgumentError,
    TrainingNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from fitness_tracker.exception_handlers import (
    domain_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.url.path = "/v1/users"
    request.method = "POST"
    return request


# ===========================
# Domain Exception Handler Tests
# ===========================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exc", "status_code", "title"),
    [
        (ValidationError("First name is required."), 400, "Bad Request"),
        (InvalidArgumentError("Invalid id"), 400, "Bad Request"),
        (UserNotFoundError(5), 404, "Not Found"),
        (TrainingNotFoundError(8), 404, "Not Found"),
        (ConflictError("There is more than one user with id: 1"), 409, "Conflict"),
    ],
)
async def test_domain_exception_handler_status_mapping(
    request_mock, exc, status_code, title
):
    # Act
    response = await domain_exception_handler(request_mock, exc)

    # Assert
    body = json.loads(response.body)
    assert response.status_code == status_code
    assert body["status"] == status_code
    assert body["title"] == title
    assert body["detail"] == exc.message
    assert body["instance"] == "/v1/users"
    assert body["type"].startswith("https://datatracker.ietf.org/")


@pytest.mark.asyncio
async def test_domain_exception_handler_base_error_is_500(request_mock):
    response = await domain_exception_handler(
        request_mock, FitnessTrackerError("broken")
    )

    assert response.status_code == 500
    assert json.loads(response.body)["title"] == "An error occurred"


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404(request_mock):
    """Test HTTP exception handler with 404 not found."""
    # Arrange
    exc = HTTPException(status_code=404, detail="Resource not found")

    # Act
    response = await http_exception_handler(request_mock, exc)

    # Assert
    assert response.status_code == 404
    assert json.loads(response.body)["detail"] == "Resource not found"


@pytest.mark.asyncio
async def test_http_exception_handler_405(request_mock):
    exc = HTTPException(status_code=405, detail="Method Not Allowed")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 405


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler_hides_details(request_mock):
    response = await general_exception_handler(request_mock, RuntimeError("secret"))

    body = json.loads(response.body)
    assert response.status_code == 500
    assert "secret" not in body["detail"]
    assert body["title"] == "Internal Server Error"


# ===========================
# Validation Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_validation_exception_handler(request_mock):
    """Test validation exception handler with request validation errors."""
    # Arrange
    exc = RequestValidationError(
        errors=[
            {
                "type": "date_from_datetime_parsing",
                "loc": ("body", "birthdate"),
                "msg": "Input should be a valid date",
                "input": "yesterday",
            }
        ]
    )

    # Act
    response = await validation_exception_handler(request_mock, exc)

    # Assert
    body = json.loads(response.body)
    assert response.status_code == 422
    assert body["errors"][0]["loc"] == ["body", "birthdate"]
    assert body["errors"][0]["input"] == "yesterday"


@pytest.mark.asyncio
async def test_validation_exception_handler_no_errors(request_mock):
    response = await validation_exception_handler(
        request_mock, RequestValidationError(errors=[])
    )

    assert response.status_code == 422
