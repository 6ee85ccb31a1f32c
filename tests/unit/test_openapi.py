"""Tests for the customized OpenAPI schema."""

from fitness_tracker.application import create_app
from fitness_tracker.infrastructure import InfrastructureFactory
from fitness_tracker.openapi import custom_openapi


def test_openapi_lists_resources_and_problem_details():
    app = create_app(infrastructure_factory=InfrastructureFactory())

    schema = custom_openapi(app)

    assert "/v1/users" in schema["paths"]
    assert "/v1/trainings/{training_id}" in schema["paths"]
    assert "ProblemDetail" in schema["components"]["schemas"]
    assert "ValidationErrorDetail" in schema["components"]["schemas"]
    post_user = schema["paths"]["/v1/users"]["post"]
    assert {"400", "409", "422"} <= set(post_user["responses"])


def test_openapi_schema_is_cached():
    app = create_app(infrastructure_factory=InfrastructureFactory())

    assert custom_openapi(app) is custom_openapi(app)


def test_user_schema_uses_camel_case():
    app = create_app(infrastructure_factory=InfrastructureFactory())

    schema = custom_openapi(app)

    user_properties = schema["components"]["schemas"]["UserResponse"]["properties"]
    assert "firstName" in user_properties
    assert "first_name" not in user_properties
