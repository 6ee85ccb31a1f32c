"""
Local file-based training repository implementation.

Stores trainings as JSON files in a local directory structure:
    {base_dir}/
        trainings/
            {id}.json

Each file references its owner by ``user_id``; the owner is loaded from
the user repository when the training is read. Files whose owner no
longer exists are skipped.
"""

import json
import threading
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any

from loguru import logger

from fitness_tracker.domain.entities import ActivityType, Training
from fitness_tracker.infrastructure.implementations.local.sequence import (
    FileSequence,
    numeric_ids,
)
from fitness_tracker.infrastructure.repositories.training_repository import (
    TrainingRepository,
)
from fitness_tracker.infrastructure.repositories.user_repository import UserRepository


class LocalTrainingRepository(TrainingRepository):
    """File-based training storage for local development."""

    def __init__(
        self,
        user_repository: UserRepository,
        base_dir: str = "./.fitness_data",
    ):
        """
        Initialize local training repository.

        Args:
            user_repository: Repository used to load training owners
            base_dir: Base directory for entity storage
        """
        self.user_repository = user_repository
        self.base_dir = Path(base_dir)
        self.trainings_dir = self.base_dir / "trainings"
        self._lock = threading.Lock()

        self.trainings_dir.mkdir(parents=True, exist_ok=True)
        self._sequence = FileSequence(self.trainings_dir)

        logger.info(f"Initialized LocalTrainingRepository at {self.base_dir}")

    def _training_path(self, training_id: int) -> Path:
        """Get path to training file."""
        return self.trainings_dir / f"{training_id}.json"

    def _training_to_dict(self, training: Training) -> dict[str, Any]:
        """Convert Training to JSON-serializable dict."""
        return {
            "id": training.id,
            "user_id": training.user.id,
            "start_time": training.start_time.isoformat(),
            "end_time": training.end_time.isoformat(),
            "activity_type": training.activity_type.value,
            "distance": training.distance,
            "average_speed": training.average_speed,
        }

    def _dict_to_training(self, data: dict[str, Any]) -> Training | None:
        """Convert dict to Training, loading its owner."""
        user = self.user_repository.find_by_id(data["user_id"])
        if user is None:
            logger.debug(f"Skipping training {data['id']} of deleted user")
            return None

        return Training(
            id=data["id"],
            user=user,
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=datetime.fromisoformat(data["end_time"]),
            activity_type=ActivityType(data["activity_type"]),
            distance=data["distance"],
            average_speed=data["average_speed"],
        )

    def find_by_id(self, training_id: int) -> Training | None:
        training_path = self._training_path(training_id)

        if not training_path.exists():
            return None

        return self._dict_to_training(json.loads(training_path.read_text()))

    def find_all(self) -> list[Training]:
        loaded = [
            self._dict_to_training(
                json.loads(self._training_path(training_id).read_text())
            )
            for training_id in sorted(numeric_ids(self.trainings_dir))
        ]
        return [training for training in loaded if training is not None]

    def save(self, training: Training) -> Training:
        with self._lock:
            data = self._training_to_dict(training)
            if training.id is None:
                data["id"] = self._sequence.next_id()
            else:
                self._sequence.advance_to(training.id)

            self._training_path(data["id"]).write_text(json.dumps(data, indent=2))

        logger.info(f"Saved training {data['id']}")
        return replace(training, id=data["id"])

    def find_by_user_id(self, user_id: int) -> list[Training]:
        return [t for t in self.find_all() if t.user.id == user_id]

    def find_by_end_time_after(self, instant: datetime) -> list[Training]:
        return [t for t in self.find_all() if t.end_time > instant]

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return [t for t in self.find_all() if t.activity_type == activity_type]
