"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's db session. They keep
no state beyond that session, so nothing is shared between requests.

Usage:
======
    from photopin.api.dependencies.services import MapServiceDep

    @router.get("")
    async def list_maps(current_user: CurrentUser, maps: MapServiceDep):
        return await maps.retrieve_user_maps(current_user["user_id"])
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from photopin.api.dependencies.database import get_db
from photopin.shared.services import MapService, PinService, UserService


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """Dependency to get a UserService bound to the request session."""
    return UserService(db)


async def get_map_service(
    db: AsyncSession = Depends(get_db),
) -> MapService:
    return MapService(db)


async def get_pin_service(
    db: AsyncSession = Depends(get_db),
) -> PinService:
    return PinService(db)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
MapServiceDep = Annotated[MapService, Depends(get_map_service)]
PinServiceDep = Annotated[PinService, Depends(get_pin_service)]
