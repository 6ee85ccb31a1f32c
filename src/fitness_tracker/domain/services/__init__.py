"""
Domain services - business logic and use cases.

Contains the service ports (abstract contracts) and the user and training
lifecycle services implementing them.
"""

from fitness_tracker.domain.services.ports import (
    TrainingProvider,
    UserProvider,
    UserService,
)
from fitness_tracker.domain.services.training_service import (
    TrainingLifecycleService,
)
from fitness_tracker.domain.services.user_service import UserLifecycleService

__all__ = [
    "TrainingLifecycleService",
    "TrainingProvider",
    "UserLifecycleService",
    "UserProvider",
    "UserService",
]
