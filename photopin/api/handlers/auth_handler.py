"""
Authentication Handler

Exchanges credentials for a bearer token.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Domain errors are not caught here; the global exception handler maps them
to their HTTP status.
"""

from datetime import timedelta

from fastapi import APIRouter

from photopin.config.settings import settings
from photopin.shared.schemas.user import AuthResponse, UserLogin
from photopin.shared.utils.security import SecurityUtils
from photopin.api.dependencies.services import UserServiceDep


router = APIRouter()


@router.post("", response_model=AuthResponse)
async def authenticate(
    credentials: UserLogin,
    user_service: UserServiceDep,
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If the email is unknown or the password is wrong
    """
    user_id = await user_service.authenticate_user(
        email=credentials.email,
        password=credentials.password,
    )

    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = SecurityUtils.create_access_token(
        data={"user_id": user_id},
        secret_key=settings.SECRET_KEY,
        expires_delta=expires_delta,
        algorithm=settings.JWT_ALGORITHM,
    )

    return AuthResponse(
        id=user_id,
        access_token=access_token,
        expires_in=int(expires_delta.total_seconds()),
    )
