"""
Pin Service

Business logic for pins.

A pin is created through a map and one of its collections (the pin row is
inserted and its id appended to the collection), but updated and removed
directly by id.

Usage:
======
    from photopin.shared.services.pin_service import PinService

    service = PinService(db)
    pin_id = await service.create_pin(user_id, map_id, "South coast", {
        "title": "Skógafoss",
        "coordinates": {"latitude": 63.5321, "longitude": -19.5114},
    })
    await service.remove_pin(user_id, pin_id)
"""

from typing import Any
from uuid import UUID

from photopin.shared.core.exceptions import ArgumentValueError, NotFoundError, OwnershipError
from photopin.shared.core.logging import get_logger
from photopin.shared.models.pin import PIN_TEXT_FIELDS
from photopin.shared.services.base import BaseService, to_uuid


logger = get_logger(__name__)


class PinService(BaseService):
    """
    Service for pin business logic.

    Handles:
    - Creating a pin inside a map collection
    - Full (or, by policy, partial) pin updates
    - Pin removal by id and author
    """

    def _check_coordinates(self, coordinates: dict[str, Any]) -> dict[str, float]:
        self.validator.check_arguments([
            {"name": "latitude", "value": coordinates.get("latitude"), "type": (int, float)},
            {"name": "longitude", "value": coordinates.get("longitude"), "type": (int, float)},
        ])

        latitude = float(coordinates["latitude"])
        longitude = float(coordinates["longitude"])

        if not -90 <= latitude <= 90:
            raise ArgumentValueError(f"latitude {latitude} is out of range", field="latitude")
        if not -180 <= longitude <= 180:
            raise ArgumentValueError(f"longitude {longitude} is out of range", field="longitude")

        return {"latitude": latitude, "longitude": longitude}

    def _check_text_fields(self, data: dict[str, Any]) -> None:
        self.validator.check_arguments([
            {"name": field, "value": data.get(field), "type": str, "optional": True}
            for field in PIN_TEXT_FIELDS
        ])

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_pin(
        self,
        user_id: str,
        map_id: str,
        collection_title: str,
        pin_data: dict[str, Any],
    ) -> str:
        """
        Create a pin and append it to a collection of the user's map.

        Args:
            user_id: The author, must own the map
            map_id: Target map
            collection_title: Target collection inside the map
            pin_data: Pin fields; ``title`` and ``coordinates`` with numeric
                ``latitude``/``longitude`` are required

        Returns:
            The id of the created pin

        Raises:
            NotFoundError: if the map or the collection does not exist
            OwnershipError: if the map belongs to another user
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
            {"name": "collectionTitle", "value": collection_title, "type": str, "not_empty": True},
            {"name": "newPin", "value": pin_data, "type": dict, "not_empty": True},
        ])
        self.validator.check_arguments([
            {"name": "title", "value": pin_data.get("title"), "type": str, "not_empty": True},
            {"name": "coordinates", "value": pin_data.get("coordinates"), "type": dict},
        ])
        self._check_text_fields(pin_data)
        coordinates = self._check_coordinates(pin_data["coordinates"])

        pin_map = await self.load_owned_map(user_id, map_id)

        index = pin_map.collection_index(collection_title)
        if index < 0:
            raise NotFoundError("Collection", message=f"collection {collection_title} not found")

        with self.storage_errors(f"error creating new pin on map {map_id}", step="pin"):
            pin = await self.pins.create(
                map_id=pin_map.id,
                author_id=pin_map.author_id,
                **{field: pin_data.get(field) for field in PIN_TEXT_FIELDS},
                **coordinates,
            )

        collections = pin_map.copy_collections()
        collections[index]["pins"].append(str(pin.id))

        with self.storage_errors(f"error linking pin {pin.id} to collection {collection_title}", step="collection"):
            await self.maps.save_collections(pin_map, collections)

        logger.info(
            "Pin created",
            pin_id=str(pin.id),
            map_id=map_id,
            collection=collection_title,
        )
        return str(pin.id)

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def update_pin(self, user_id: str, pin_id: str, pin_data: dict[str, Any]) -> dict[str, Any]:
        """
        Overwrite the pin's text fields.

        By default every text field is written and a key missing from
        ``pin_data`` becomes None. With ``policy.partial_pin_update`` only the
        keys present are written. Coordinates change only when supplied.
        The title is required unless a partial update leaves it out.

        Returns:
            The updated pin dict

        Raises:
            NotFoundError: if the pin does not exist
            OwnershipError: if the pin belongs to another user
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "pinId", "value": pin_id, "type": str, "not_empty": True},
            {"name": "data", "value": pin_data, "type": dict, "not_empty": True},
        ])
        # title is NOT NULL: required on a full overwrite, and never clearable
        title_optional = self.policy.partial_pin_update and "title" not in pin_data
        self.validator.check_arguments([
            {"name": "coordinates", "value": pin_data.get("coordinates"), "type": dict, "optional": True},
            {"name": "title", "value": pin_data.get("title"), "type": str, "not_empty": True, "optional": title_optional},
        ])
        self._check_text_fields(pin_data)
        coordinates = (
            self._check_coordinates(pin_data["coordinates"])
            if pin_data.get("coordinates") is not None
            else {}
        )

        pin_uuid = to_uuid(pin_id)
        pin = None
        if pin_uuid is not None:
            with self.storage_errors(f"error retrieving pin {pin_id}"):
                pin = await self.pins.get(pin_uuid)

        if pin is None:
            raise NotFoundError("Pin", pin_id, message=f"no pin with id {pin_id}")

        if pin.author_id != to_uuid(user_id):
            raise OwnershipError(f"pin {pin_id} is not from user {user_id}")

        if self.policy.partial_pin_update:
            updates = {field: pin_data[field] for field in PIN_TEXT_FIELDS if field in pin_data}
        else:
            updates = {field: pin_data.get(field) for field in PIN_TEXT_FIELDS}
        updates.update(coordinates)

        with self.storage_errors(f"error updating pin with id {pin_id}"):
            pin = await self.pins.update(pin, **updates)

        logger.info("Pin updated", pin_id=pin_id, fields=sorted(updates))
        return pin.to_dict()

    # ═══════════════════════════════════════════════════════════════════════════
    # REMOVE
    # ═══════════════════════════════════════════════════════════════════════════

    async def remove_pin(self, user_id: str, pin_id: str) -> None:
        """
        Delete a pin matching both id and author.

        The pin id stays in its collection unless
        ``policy.prune_pin_reference_on_remove`` is on.

        Raises:
            NotFoundError: if no pin with this id belongs to the user,
                so removing the same pin twice always fails
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "pinId", "value": pin_id, "type": str, "not_empty": True},
        ])

        pin_uuid = to_uuid(pin_id)
        user_uuid = to_uuid(user_id)
        deleted = None
        if pin_uuid is not None and user_uuid is not None:
            with self.storage_errors(f"Unable remove pin {pin_id} from user {user_id}", step="pin"):
                deleted = await self.pins.delete_owned(pin_uuid, user_uuid)

        if deleted is None:
            raise NotFoundError(
                "Pin",
                pin_id,
                message=f"No pin with id {pin_id} was found for user {user_id}",
            )

        if self.policy.prune_pin_reference_on_remove:
            await self._prune_reference(deleted.map_id, str(deleted.id))

        logger.info("Pin removed", pin_id=pin_id, user_id=user_id)

    async def _prune_reference(self, map_uuid: UUID, pin_id: str) -> None:
        with self.storage_errors(f"error unlinking pin {pin_id}", step="collection"):
            pin_map = await self.maps.get(map_uuid)
            if pin_map is None:
                return

            collections = pin_map.copy_collections()
            for collection in collections:
                collection["pins"] = [ref for ref in collection["pins"] if ref != pin_id]

            await self.maps.save_collections(pin_map, collections)
