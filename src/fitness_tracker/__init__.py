"""Fitness tracker backend: users and trainings over HTTP."""

__version__ = "1.0.0"
