"""Training API Routes - Route registration only."""

from fastapi import APIRouter

from fitness_tracker.api.v1 import TRAININGS_PREFIX
from fitness_tracker.api.v1.trainings import api

router = APIRouter()
router.include_router(api.router, prefix=TRAININGS_PREFIX, tags=["trainings"])
