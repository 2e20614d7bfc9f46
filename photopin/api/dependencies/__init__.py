"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Services: get_*_service() functions and their *ServiceDep aliases

Type Aliases:
=============
    # Instead of this:
    async def handler(
        user: dict = Depends(get_current_user),
        maps: MapService = Depends(get_map_service),
    ):

    # Write this:
    async def handler(user: CurrentUser, maps: MapServiceDep):
"""

from photopin.api.dependencies.database import (
    get_db,
    DbSession,
)
from photopin.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    CurrentUser,
)
from photopin.api.dependencies.services import (
    get_user_service,
    get_map_service,
    get_pin_service,
    UserServiceDep,
    MapServiceDep,
    PinServiceDep,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "CurrentUser",
    # Services
    "get_user_service",
    "get_map_service",
    "get_pin_service",
    "UserServiceDep",
    "MapServiceDep",
    "PinServiceDep",
]
