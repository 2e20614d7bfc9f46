"""
Map Handler

Maps and the named collections inside them.

Endpoints:
==========
    GET    /maps                                → caller's maps
    POST   /maps                                → create map
    GET    /maps/{map_id}                       → map with pins populated
    PATCH  /maps/{map_id}                       → update map
    DELETE /maps/{map_id}                       → remove map and its pins
    POST   /maps/{map_id}/collections           → add collection
    PATCH  /maps/{map_id}/collections/{title}   → rename collection (title may contain "/")
    DELETE /maps/{map_id}/collections/{title}   → remove collection
"""

from fastapi import APIRouter, status

from photopin.shared.schemas.common import CountResponse, IdResponse
from photopin.shared.schemas.map import (
    CollectionCreate,
    CollectionRename,
    MapCreate,
    MapResponse,
    MapUpdate,
    PopulatedMapResponse,
)
from photopin.api.dependencies.auth import CurrentUser
from photopin.api.dependencies.services import MapServiceDep


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# MAPS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=list[MapResponse])
async def list_maps(
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    return await map_service.retrieve_user_maps(current_user["user_id"])


@router.post(
    "",
    response_model=IdResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_map(
    map_data: MapCreate,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    map_id = await map_service.create_map(
        current_user["user_id"],
        map_data.title,
        description=map_data.description,
        cover_image=map_data.cover_image,
        is_public=map_data.is_public,
    )
    return IdResponse(id=map_id)


@router.get("/{map_id}", response_model=PopulatedMapResponse)
async def get_map(
    map_id: str,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    """
    Get a map with its pins.

    Public maps are readable by any authenticated user; private ones only
    by their author.
    """
    return await map_service.retrieve_user_map(current_user["user_id"], map_id)


@router.patch("/{map_id}", response_model=MapResponse)
async def update_map(
    map_id: str,
    map_data: MapUpdate,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    return await map_service.update_map(
        current_user["user_id"],
        map_id,
        map_data.model_dump(exclude_unset=True),
    )


@router.delete("/{map_id}", response_model=MapResponse)
async def remove_map(
    map_id: str,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    return await map_service.remove_map(current_user["user_id"], map_id)


# ═══════════════════════════════════════════════════════════════════════════════
# COLLECTIONS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/{map_id}/collections",
    response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_collection(
    map_id: str,
    collection: CollectionCreate,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    count = await map_service.create_collection(
        current_user["user_id"], map_id, collection.title
    )
    return CountResponse(count=count)


@router.patch("/{map_id}/collections/{title:path}", response_model=MapResponse)
async def rename_collection(
    map_id: str,
    title: str,
    collection: CollectionRename,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    return await map_service.update_collection(
        current_user["user_id"], map_id, title, collection.title
    )


@router.delete("/{map_id}/collections/{title:path}", response_model=MapResponse)
async def remove_collection(
    map_id: str,
    title: str,
    current_user: CurrentUser,
    map_service: MapServiceDep,
):
    """Remove a collection and delete the pins it referenced."""
    return await map_service.remove_collection(current_user["user_id"], map_id, title)
