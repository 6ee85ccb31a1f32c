"""User endpoints."""
