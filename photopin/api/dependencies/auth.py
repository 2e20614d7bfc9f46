"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Read the user id from the payload

The user id in the token is trusted as is: a token for a user that has since
been removed resolves to "user not found" in the service layer.

Usage:
======
    from photopin.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user["user_id"]
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from photopin.config.settings import settings
from photopin.shared.core.exceptions import AuthenticationError
from photopin.shared.core.logging import clear_log_context, log_context
from photopin.shared.utils.security import SecurityUtils


# auto_error=False so a missing header goes through AuthenticationError (401)
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: If user_id not in token
    """
    user_id = token.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    # user_id is attached to every log line of this request
    clear_log_context()
    log_context(user_id=user_id)

    return {"user_id": user_id}


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]
