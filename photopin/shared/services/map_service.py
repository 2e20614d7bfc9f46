"""
Map Service

Business logic for maps and the collections embedded in them.

Collections have no id of their own: they are addressed by (map_id, title)
and stored, in order, inside the map row. Only the map's author may change
a map or its collections; anyone may read a public map.

Usage:
======
    from photopin.shared.services.map_service import MapService

    service = MapService(db)
    map_id = await service.create_map(user_id, "Iceland", "Ring road", None)
    await service.create_collection(user_id, map_id, "South coast")
    full_map = await service.retrieve_user_map(user_id, map_id)
"""

from typing import Any, Optional

from photopin.shared.core.exceptions import (
    ArgumentTypeError,
    DuplicateResourceError,
    NotFoundError,
    OwnershipError,
)
from photopin.shared.core.logging import get_logger
from photopin.shared.services.base import BaseService, to_uuid


logger = get_logger(__name__)


class MapService(BaseService):
    """
    Service for map and collection business logic.

    Handles:
    - Map CRUD with ownership checks
    - Populated map view (collections with their pins)
    - Collection create / rename / remove inside a map
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # MAPS
    # ═══════════════════════════════════════════════════════════════════════════

    async def retrieve_user_maps(self, user_id: str) -> list[dict[str, Any]]:
        """
        Get every map authored by the user, public or private.

        Collections are returned with pin ids, not populated pins.
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
        ])

        user_uuid = to_uuid(user_id)
        if user_uuid is None:
            return []

        with self.storage_errors(f"error retrieving maps of user {user_id}"):
            maps = await self.maps.list_by_author(user_uuid)

        return [pin_map.to_dict() for pin_map in maps]

    async def retrieve_user_map(self, user_id: str, map_id: str) -> dict[str, Any]:
        """
        Get a map with every collection's pins materialized.

        Args:
            user_id: Requesting user
            map_id: Map to read

        Returns:
            Map dict whose collections hold full pin dicts, in collection order.
            Ids whose pin was removed are skipped.

        Raises:
            NotFoundError: if the map does not exist
            OwnershipError: if the map is private and not authored by user_id
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
        ])

        pin_map = await self.load_map(map_id)

        if not pin_map.is_public and not pin_map.is_authored_by(to_uuid(user_id)):
            raise OwnershipError(f"map {map_id} is not from user {user_id}")

        pin_uuids = [pin_uuid for pin_uuid in map(to_uuid, pin_map.pin_ids()) if pin_uuid]
        with self.storage_errors(f"error retrieving pins of map {map_id}"):
            pins = {pin.id: pin for pin in await self.pins.get_by_ids(pin_uuids)}

        result = pin_map.to_dict()
        for collection in result["collections"]:
            collection["pins"] = [
                pins[pin_uuid].to_dict()
                for pin_uuid in map(to_uuid, collection["pins"])
                if pin_uuid in pins
            ]

        return result

    async def create_map(
        self,
        user_id: str,
        title: str,
        description: Optional[str] = None,
        cover_image: Optional[str] = None,
        is_public: bool = False,
    ) -> str:
        """
        Create a new, empty map owned by ``user_id``.

        Returns:
            The id of the created map

        Raises:
            NotFoundError: if the user does not exist
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "title", "value": title, "type": str, "not_empty": True},
            {"name": "description", "value": description, "type": str, "optional": True},
            {"name": "coverImage", "value": cover_image, "type": str, "optional": True},
            {"name": "isPublic", "value": is_public, "type": bool},
        ])

        user_uuid = to_uuid(user_id)
        with self.storage_errors(f"error creating map for user {user_id}"):
            author = await self.users.get(user_uuid) if user_uuid else None
            if author is None:
                raise NotFoundError("User", user_id, message=f"user with id {user_id} doesn't exists")

            pin_map = await self.maps.create(
                title=title,
                description=description,
                cover_image=cover_image,
                is_public=is_public,
                author_id=author.id,
                collections=[],
            )

        logger.info("Map created", map_id=str(pin_map.id), user_id=user_id)
        return str(pin_map.id)

    async def update_map(self, user_id: str, map_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Update title, description and cover image of a map.

        Only truthy values are applied: an empty string leaves the field as it
        was, it does not blank it. ``is_public`` is applied whenever it is
        present and not None. Other keys are ignored.

        Returns:
            The updated map dict

        Raises:
            NotFoundError: if the map does not exist
            OwnershipError: if the map belongs to another user
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
            {"name": "data", "value": data, "type": dict, "not_empty": True},
        ])
        self.validator.check_arguments([
            {"name": field, "value": data.get(field), "type": str, "optional": True}
            for field in ("title", "description", "cover_image")
        ])
        if data.get("is_public") is not None and not isinstance(data["is_public"], bool):
            raise ArgumentTypeError(f"is_public {data['is_public']!r} is not a bool", field="is_public")

        pin_map = await self.load_owned_map(user_id, map_id)

        updates = {
            field: data[field]
            for field in ("title", "description", "cover_image")
            if data.get(field)
        }
        if data.get("is_public") is not None:
            updates["is_public"] = data["is_public"]

        with self.storage_errors(f"error updating map with id {map_id}"):
            pin_map = await self.maps.update(pin_map, **updates)

        logger.info("Map updated", map_id=map_id, fields=sorted(updates))
        return pin_map.to_dict()

    async def remove_map(self, user_id: str, map_id: str) -> dict[str, Any]:
        """
        Delete a map and every pin whose map_id is this map.

        Returns:
            The removed map dict
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
        ])

        pin_map = await self.load_owned_map(user_id, map_id)
        removed = pin_map.to_dict()

        with self.storage_errors(f"error removing pins of map {map_id}", step="pins"):
            pin_count = await self.pins.delete_by_map(pin_map.id)

        with self.storage_errors(f"error removing map {map_id}", step="map"):
            await self.maps.delete(pin_map)

        logger.info("Map removed", map_id=map_id, user_id=user_id, pins=pin_count)
        return removed

    # ═══════════════════════════════════════════════════════════════════════════
    # COLLECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_collection(self, user_id: str, map_id: str, title: str) -> int:
        """
        Append a new empty collection to a map.

        Returns:
            The number of collections in the map after the insert

        Raises:
            DuplicateResourceError: title already used, only when
                policy.unique_collection_titles_on_create is on
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
            {"name": "collectionTitle", "value": title, "type": str, "not_empty": True},
        ])

        pin_map = await self.load_owned_map(user_id, map_id)

        if self.policy.unique_collection_titles_on_create and pin_map.collection_index(title) >= 0:
            raise DuplicateResourceError(f"collection {title} already exist on map {map_id}")

        collections = pin_map.copy_collections()
        collections.append({"title": title, "pins": []})

        with self.storage_errors(f"error creating new collection on map {map_id}"):
            await self.maps.save_collections(pin_map, collections)

        logger.info("Collection created", map_id=map_id, title=title)
        return len(collections)

    async def update_collection(
        self,
        user_id: str,
        map_id: str,
        title: str,
        new_title: str,
    ) -> dict[str, Any]:
        """
        Rename a collection in place.

        Clash detection depends on the policy. By default only the first
        collection carrying ``new_title`` is looked at, and a clash is
        reported when it is not at position 0. With
        ``strict_collection_rename_check`` any other collection with that
        title is a clash.

        Returns:
            The updated map dict

        Raises:
            NotFoundError: if the map or the collection does not exist
            OwnershipError: if the map belongs to another user
            DuplicateResourceError: if the new title clashes
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
            {"name": "collectionTitle", "value": title, "type": str, "not_empty": True},
            {"name": "newTitle", "value": new_title, "type": str, "not_empty": True},
        ])

        pin_map = await self.load_owned_map(user_id, map_id)

        index = pin_map.collection_index(title)
        if index < 0:
            raise NotFoundError(
                "Collection",
                message=f"map {map_id} doesn't have a collection with title {title}",
            )

        collections = pin_map.copy_collections()

        if self.policy.strict_collection_rename_check:
            clash = any(
                position != index and collection["title"] == new_title
                for position, collection in enumerate(collections)
            )
        else:
            clash = pin_map.collection_index(new_title) > 0

        if clash:
            raise DuplicateResourceError(
                f"error updating, collection {new_title} already exist on map {map_id}"
            )

        collections[index]["title"] = new_title

        with self.storage_errors(f"error updating collection {title} on map {map_id}"):
            pin_map = await self.maps.save_collections(pin_map, collections)

        logger.info("Collection renamed", map_id=map_id, title=title, new_title=new_title)
        return pin_map.to_dict()

    async def remove_collection(self, user_id: str, map_id: str, title: str) -> dict[str, Any]:
        """
        Remove a collection and delete every pin it referenced.

        Returns:
            The map dict without the collection
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "mapId", "value": map_id, "type": str, "not_empty": True},
            {"name": "collectionTitle", "value": title, "type": str, "not_empty": True},
        ])

        pin_map = await self.load_owned_map(user_id, map_id)

        index = pin_map.collection_index(title)
        if index < 0:
            raise NotFoundError(
                "Collection",
                message=f"map {map_id} doesn't have a collection with title {title}",
            )

        collections = pin_map.copy_collections()
        removed = collections.pop(index)
        pin_uuids = [pin_uuid for pin_uuid in map(to_uuid, removed["pins"]) if pin_uuid]

        with self.storage_errors(f"error removing collection {title} from map {map_id}", step="collection"):
            pin_map = await self.maps.save_collections(pin_map, collections)

        with self.storage_errors(f"error removing pins of collection {title}", step="pins"):
            pin_count = await self.pins.delete_by_ids(pin_uuids)

        logger.info("Collection removed", map_id=map_id, title=title, pins=pin_count)
        return pin_map.to_dict()

