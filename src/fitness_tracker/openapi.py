"""OpenAPI schema customization for the Fitness Tracker API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from fitness_tracker.models.errors import ProblemDetail

PROBLEM_RESPONSES: dict[str, str] = {
    "400": "Invalid argument or field validation failure",
    "404": "User or training not found",
    "409": "Conflicting data (duplicate email)",
    "422": "Validation Error",
    "500": "Internal Server Error",
}


def _problem_detail_schemas() -> dict[str, Any]:
    schema = ProblemDetail.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    definitions = schema.pop("$defs", {})
    return {"ProblemDetail": schema, **definitions}


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title="Fitness Tracker API",
        version=app.version,
        description="""
# Fitness Tracker API

Backend for registering users and recording their trainings.

## API Endpoints

### Health Check
- `GET /health` - Basic health check

### Users
- `GET /v1/users` - List users
- `GET /v1/users/simple` - List users with names only
- `POST /v1/users` - Create a user
- `GET /v1/users/{id}` - Get a user
- `GET /v1/users/email?email=` - Find a user by email
- `GET /v1/users/partial-email?partialEmail=` - Find users by email fragment
- `GET /v1/users/older/{date}` - Users born before a date
- `POST /v1/users/matching-users` - Search users
- `PUT /v1/users/{id}` - Partially update a user
- `DELETE /v1/users/{id}` - Delete a user

### Trainings
- `GET /v1/trainings` - List trainings
- `GET /v1/trainings/{userId}` - Trainings of a user
- `GET /v1/trainings/finished/{date}` - Trainings finished after a date
- `GET /v1/trainings/activityType?activityType=` - Trainings by activity
- `POST /v1/trainings` - Create a training
- `PUT /v1/trainings/{trainingId}` - Partially update a training

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807) format:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1",
  "title": "Bad Request",
  "status": 400,
  "detail": "First name contains invalid characters.",
  "instance": "/v1/users"
}
```
        """,
        routes=app.routes,
    )

    openapi_schema["tags"] = [
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring",
        },
        {
            "name": "users",
            "description": "User registration, lookup, search and removal",
        },
        {
            "name": "trainings",
            "description": "Training recording and queries",
        },
    ]

    components = openapi_schema.setdefault("components", {})
    components.setdefault("schemas", {}).update(_problem_detail_schemas())

    # Add RFC 7807 error responses to all endpoints
    for path in openapi_schema["paths"].values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                for code, description in PROBLEM_RESPONSES.items():
                    operation["responses"][code] = {
                        "description": description,
                        "content": {
                            "application/json": {
                                "schema": {
                                    "$ref": "#/components/schemas/ProblemDetail"
                                }
                            }
                        },
                    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
