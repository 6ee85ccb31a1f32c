"""
Training API endpoints.

Handles training creation, partial updates and the training queries
(by owner, by activity type, finished after a date).
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, status

from fitness_tracker.api.v1.trainings.request import TrainingRequestBody
from fitness_tracker.api.v1.trainings.response import TrainingResponse
from fitness_tracker.di import TrainingServiceDep
from fitness_tracker.domain.entities import ActivityType, Training

router = APIRouter()


def _to_responses(trainings: list[Training]) -> list[TrainingResponse]:
    return [TrainingResponse.from_entity(training) for training in trainings]


@router.get(
    "",
    response_model=list[TrainingResponse],
    summary="List all trainings",
)
def get_all_trainings(service: TrainingServiceDep) -> list[TrainingResponse]:
    return _to_responses(service.find_all_trainings())


@router.get(
    "/activityType",
    response_model=list[TrainingResponse],
    summary="Find trainings by activity type",
)
def get_trainings_by_activity_type(
    activity_type: Annotated[
        ActivityType, Query(alias="activityType", description="Kind of exercise")
    ],
    service: TrainingServiceDep,
) -> list[TrainingResponse]:
    return _to_responses(service.find_trainings_by_activity_type(activity_type))


@router.get(
    "/finished/{after_time}",
    response_model=list[TrainingResponse],
    summary="Find trainings finished after a date",
    description="""
    Trainings whose end instant is strictly after the start of the given
    day, in the server's local time zone.
    """,
)
def get_finished_trainings_after(
    after_time: date, service: TrainingServiceDep
) -> list[TrainingResponse]:
    return _to_responses(service.find_finished_trainings_after(after_time))


@router.get(
    "/{user_id}",
    response_model=list[TrainingResponse],
    summary="Find trainings of a user",
)
def get_trainings_for_user(
    user_id: int, service: TrainingServiceDep
) -> list[TrainingResponse]:
    return _to_responses(service.find_trainings_by_user_id(user_id))


@router.post(
    "",
    response_model=TrainingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a training",
    description="""
    Record a training for an existing user.

    **Required**: userId, startTime, endTime, activityType.
    Distance and average speed default to 0 and must not be negative.
    """,
)
def create_training(
    request: TrainingRequestBody, service: TrainingServiceDep
) -> TrainingResponse:
    """
    Create a training.

    Args:
        request: Training payload
        service: Training service (injected)

    Returns:
        The stored training
    """
    return TrainingResponse.from_entity(service.create_training(request.to_request()))


@router.put(
    "/{training_id}",
    response_model=TrainingResponse,
    summary="Update a training",
    description="""
    Partially update a training.

    The owner is always taken from userId. Other fields are changed only
    when present and not null; distance and average speed only when
    greater than zero.
    """,
)
def update_training(
    training_id: int, request: TrainingRequestBody, service: TrainingServiceDep
) -> TrainingResponse:
    return TrainingResponse.from_entity(
        service.update_training(training_id, request.to_request())
    )
