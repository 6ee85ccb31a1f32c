"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = "/v1"

# Module-specific prefixes
USERS_PREFIX: str = f"{API_V1_PREFIX}/users"
TRAININGS_PREFIX: str = f"{API_V1_PREFIX}/trainings"

__all__ = [
    "API_V1_PREFIX",
    "USERS_PREFIX",
    "TRAININGS_PREFIX",
]
