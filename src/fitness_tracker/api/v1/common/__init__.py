"""Models shared by the v1 endpoints."""
