"""
User Handler

Registration and the authenticated user's own profile.
"""

from fastapi import APIRouter, status

from photopin.shared.schemas.common import IdResponse
from photopin.shared.schemas.user import UserRegister, UserResponse, UserUpdate
from photopin.api.dependencies.auth import CurrentUser
from photopin.api.dependencies.services import UserServiceDep


router = APIRouter()


@router.post(
    "",
    response_model=IdResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    user_service: UserServiceDep,
):
    """
    Register a new user.

    Raises:
        409: If the email is already registered
    """
    user_id = await user_service.register_user(
        name=user_data.name,
        surname=user_data.surname,
        email=user_data.email,
        password=user_data.password,
    )
    return IdResponse(id=user_id)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: CurrentUser,
    user_service: UserServiceDep,
):
    return await user_service.retrieve_user(current_user["user_id"])


@router.patch("/me", response_model=UserResponse)
async def update_me(
    user_data: UserUpdate,
    current_user: CurrentUser,
    user_service: UserServiceDep,
):
    """
    Update the fields sent in the body.

    Returns the profile as it was before the update.
    """
    return await user_service.update_user(
        current_user["user_id"],
        user_data.model_dump(exclude_unset=True, mode="json"),
    )


@router.delete("/me", response_model=UserResponse)
async def remove_me(
    current_user: CurrentUser,
    user_service: UserServiceDep,
):
    """Delete the account with all its maps and pins; returns the removed profile."""
    return await user_service.remove_user(current_user["user_id"])
