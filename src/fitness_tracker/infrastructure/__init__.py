"""
Infrastructure abstraction layer for persistence.

This module provides repository interfaces and implementations for:
- User storage
- Training storage

Supports multiple providers via factory pattern:
- memory: In-process storage
- local: JSON file storage for development
"""

from fitness_tracker.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]
