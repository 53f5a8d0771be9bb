"""
User Handler

Browse registered users and edit your own profile.

Route order matters: PATCH /users/me is declared before /users/{user_id}
so "me" is never parsed as a UUID.
"""

from uuid import UUID

from fastapi import APIRouter

from src.api.dependencies import CurrentUser, Pagination, UserServiceDep
from src.shared.schemas.common import PaginatedResponse, PaginationMeta
from src.shared.schemas.user import UserResponse, UserUpdate


router = APIRouter()


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    _current_user: CurrentUser,
    pagination: Pagination,
    user_service: UserServiceDep,
):
    """List users ordered by email."""
    users, total = await user_service.list_users(
        offset=pagination.offset,
        limit=pagination.limit,
    )
    return PaginatedResponse[UserResponse](
        data=[UserResponse.model_validate(user) for user in users],
        pagination=PaginationMeta.create(
            page=pagination.page,
            per_page=pagination.per_page,
            total=total,
        ),
    )


@router.patch("/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    current_user: CurrentUser,
    user_service: UserServiceDep,
):
    """Update the authenticated user's profile."""
    return await user_service.update_profile(current_user, full_name=data.full_name)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    _current_user: CurrentUser,
    user_service: UserServiceDep,
):
    """
    Get a user by id.

    Raises:
        404: Unknown user
        422: user_id is not a UUID
    """
    return await user_service.get_user(user_id)
