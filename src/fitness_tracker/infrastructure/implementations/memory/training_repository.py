"""
In-memory training repository implementation.

Trainings are stored with a snapshot of their owner; on every read the
owner is refreshed from the user repository so updates to a user are
visible through its trainings. Trainings whose owner was deleted are
skipped and dropped from the store.
"""

import threading
from dataclasses import replace
from datetime import datetime

from loguru import logger

from fitness_tracker.domain.entities import ActivityType, Training
from fitness_tracker.infrastructure.repositories.training_repository import (
    TrainingRepository,
)
from fitness_tracker.infrastructure.repositories.user_repository import UserRepository


class InMemoryTrainingRepository(TrainingRepository):
    """Dict-backed training storage."""

    def __init__(self, user_repository: UserRepository):
        """
        Initialize in-memory training repository.

        Args:
            user_repository: Source of current owner data
        """
        self.user_repository = user_repository
        self._trainings: dict[int, Training] = {}
        self._next_id = 1
        self._lock = threading.Lock()

        logger.info("Initialized InMemoryTrainingRepository")

    def _hydrate(self, training: Training | None) -> Training | None:
        if training is None:
            return None
        owner = self.user_repository.find_by_id(training.user.id)
        if owner is None:
            return None
        return replace(training, user=owner)

    def find_by_id(self, training_id: int) -> Training | None:
        with self._lock:
            training = self._trainings.get(training_id)
        return self._hydrate(training)

    def find_all(self) -> list[Training]:
        with self._lock:
            trainings = list(self._trainings.values())
        hydrated = [self._hydrate(training) for training in trainings]

        orphaned = [
            stored.id
            for stored, training in zip(trainings, hydrated, strict=True)
            if training is None
        ]
        if orphaned:
            with self._lock:
                for training_id in orphaned:
                    self._trainings.pop(training_id, None)
            logger.debug(f"Dropped trainings of deleted users: {orphaned}")

        return [training for training in hydrated if training is not None]

    def save(self, training: Training) -> Training:
        with self._lock:
            if training.id is None:
                training = replace(training, id=self._next_id)
                self._next_id += 1
            else:
                self._next_id = max(self._next_id, training.id + 1)
            self._trainings[training.id] = replace(training)

        logger.debug(f"Saved training {training.id}")
        return replace(training)

    def find_by_user_id(self, user_id: int) -> list[Training]:
        return [t for t in self.find_all() if t.user.id == user_id]

    def find_by_end_time_after(self, instant: datetime) -> list[Training]:
        return [t for t in self.find_all() if t.end_time > instant]

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return [t for t in self.find_all() if t.activity_type == activity_type]
