"""
Pin Handler

Pins are created inside a collection of a map and then addressed by id.
"""

from fastapi import APIRouter, Response, status

from photopin.shared.schemas.common import IdResponse
from photopin.shared.schemas.pin import PinCreate, PinResponse, PinUpdate
from photopin.api.dependencies.auth import CurrentUser
from photopin.api.dependencies.services import PinServiceDep


router = APIRouter()


@router.post(
    "/maps/{map_id}/collections/{title:path}/pins",
    response_model=IdResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pin(
    map_id: str,
    title: str,
    pin_data: PinCreate,
    current_user: CurrentUser,
    pin_service: PinServiceDep,
):
    pin_id = await pin_service.create_pin(
        current_user["user_id"],
        map_id,
        title,
        pin_data.model_dump(),
    )
    return IdResponse(id=pin_id)


@router.patch("/pins/{pin_id}", response_model=PinResponse)
async def update_pin(
    pin_id: str,
    pin_data: PinUpdate,
    current_user: CurrentUser,
    pin_service: PinServiceDep,
):
    """
    Update a pin.

    Only the fields present in the body are forwarded; depending on
    configuration, text fields left out are either cleared or kept.
    """
    return await pin_service.update_pin(
        current_user["user_id"],
        pin_id,
        pin_data.model_dump(exclude_unset=True),
    )


@router.delete("/pins/{pin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_pin(
    pin_id: str,
    current_user: CurrentUser,
    pin_service: PinServiceDep,
):
    await pin_service.remove_pin(current_user["user_id"], pin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
