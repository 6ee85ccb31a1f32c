"""
User API endpoints.

Thin mapping between HTTP and the user lifecycle service. Domain failures
propagate to the global exception handlers, which turn them into
problem-detail responses.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, Response, status
from loguru import logger

from fitness_tracker.api.v1.users.request import (
    UserRequest,
    UserSearchRequest,
    UserUpdateRequest,
)
from fitness_tracker.api.v1.users.response import (
    UserEmailResponse,
    UserResponse,
    UserSimpleResponse,
)
from fitness_tracker.di import UserServiceDep
from fitness_tracker.domain.exceptions import UserNotFoundError

router = APIRouter()


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users",
)
def get_all_users(service: UserServiceDep) -> list[UserResponse]:
    return [UserResponse.from_entity(user) for user in service.find_all_users()]


@router.get(
    "/simple",
    response_model=list[UserSimpleResponse],
    summary="List users with names only",
)
def get_simple_data_for_all_users(
    service: UserServiceDep,
) -> list[UserSimpleResponse]:
    return [
        UserSimpleResponse.from_entity(user) for user in service.find_all_users()
    ]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="""
    Create a new user.

    **Rules**:
    - First and last name: letters, spaces, dots, apostrophes and hyphens
    - Birthdate: today or earlier
    - Email: well-formed and not used by another user
    """,
)
def add_user(request: UserRequest, service: UserServiceDep) -> UserResponse:
    """
    Create a user.

    Args:
        request: User fields
        service: User service (injected)

    Returns:
        The stored user with its assigned id
    """
    logger.info(f"User with e-mail: {request.email} passed to the request")
    return UserResponse.from_entity(service.create_user(request.to_entity()))


@router.get(
    "/email",
    response_model=list[UserResponse],
    summary="Find a user by email",
    description="Returns a list with the matching user, or an empty list.",
)
def get_user_details_by_email(
    email: Annotated[str, Query(description="Email address, case-insensitive")],
    service: UserServiceDep,
) -> list[UserResponse]:
    user = service.get_user_details_by_email(email)
    return [UserResponse.from_entity(user)] if user is not None else []


@router.get(
    "/partial-email",
    response_model=list[UserResponse],
    summary="Find users by email fragment",
)
def get_user_details_by_partial_email(
    partial_email: Annotated[
        str,
        Query(alias="partialEmail", description="Fragment of the email address"),
    ],
    service: UserServiceDep,
) -> list[UserResponse]:
    return [
        UserResponse.from_entity(user)
        for user in service.find_matching_users_by_partial_email(partial_email)
    ]


@router.get(
    "/older/{day}",
    response_model=list[UserResponse],
    summary="Find users born before a date",
)
def get_users_older_than(day: date, service: UserServiceDep) -> list[UserResponse]:
    return [
        UserResponse.from_entity(user) for user in service.find_users_older_than(day)
    ]


@router.post(
    "/matching-users",
    response_model=list[UserEmailResponse],
    summary="Search users",
    description="""
    Find users matching every criterion present in the body.

    Omitted criteria match all users. Only id and email are returned.
    """,
)
def find_matching_users(
    request: UserSearchRequest, service: UserServiceDep
) -> list[UserEmailResponse]:
    return [
        UserEmailResponse.from_entity(user)
        for user in service.find_matching_users(request.to_search())
    ]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by id",
)
def get_user_details_by_id(user_id: int, service: UserServiceDep) -> UserResponse:
    """
    Get a single user.

    Raises:
        UserNotFoundError: If no user has this id (404)
    """
    user = service.get_user_details_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserResponse.from_entity(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="""
    Partially update a user.

    Only fields present in the body are changed; a field sent as null
    keeps the stored value.
    """,
)
def update_user(
    user_id: int, request: UserUpdateRequest, service: UserServiceDep
) -> UserResponse:
    return UserResponse.from_entity(service.update_user(user_id, request.to_patch()))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
def delete_user(user_id: int, service: UserServiceDep) -> Response:
    service.delete_user_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
