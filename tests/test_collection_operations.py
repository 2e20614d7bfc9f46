import uuid

import pytest

from photopin.shared.core.exceptions import (
    ArgumentValueError,
    DuplicateResourceError,
    NotFoundError,
    OwnershipError,
    ValidationError,
)
from photopin.shared.repositories import PinRepository


async def add_collections(map_service, user_id, map_id, *titles):
    for title in titles:
        await map_service.create_collection(user_id, map_id, title)


def titles(pin_map):
    return [collection["title"] for collection in pin_map["collections"]]


class TestCreateCollection:
    async def test_returns_count(self, map_service, user_id, map_id):
        assert await map_service.create_collection(user_id, map_id, "Waterfalls") == 1
        assert await map_service.create_collection(user_id, map_id, "Glaciers") == 2

    async def test_other_user(self, map_service, other_user_id, map_id):
        with pytest.raises(OwnershipError):
            await map_service.create_collection(other_user_id, map_id, "Waterfalls")

    async def test_unknown_map(self, map_service, user_id):
        with pytest.raises(NotFoundError):
            await map_service.create_collection(user_id, str(uuid.uuid4()), "Waterfalls")

    async def test_empty_title(self, map_service, user_id, map_id):
        with pytest.raises(ValidationError):
            await map_service.create_collection(user_id, map_id, "")

    async def test_blank_title(self, map_service, user_id, map_id):
        with pytest.raises(ArgumentValueError):
            await map_service.create_collection(user_id, map_id, "   ")

    async def test_duplicate_title_allowed_by_default(self, map_service, user_id, map_id):
        await add_collections(map_service, user_id, map_id, "Waterfalls")
        assert await map_service.create_collection(user_id, map_id, "Waterfalls") == 2

    async def test_duplicate_title_rejected_when_unique(self, make_services, user_id, map_id):
        _, maps, _ = make_services(unique_collection_titles_on_create=True)
        await maps.create_collection(user_id, map_id, "Waterfalls")

        with pytest.raises(DuplicateResourceError):
            await maps.create_collection(user_id, map_id, "Waterfalls")


class TestUpdateCollection:
    async def test_rename_in_place(self, map_service, user_id, map_id):
        await add_collections(map_service, user_id, map_id, "Waterfalls", "Glaciers", "Beaches")

        pin_map = await map_service.update_collection(user_id, map_id, "Glaciers", "Ice")
        assert titles(pin_map) == ["Waterfalls", "Ice", "Beaches"]

    async def test_unknown_collection(self, map_service, user_id, map_id):
        with pytest.raises(NotFoundError) as exc:
            await map_service.update_collection(user_id, map_id, "Glaciers", "Ice")
        assert str(exc.value) == f"map {map_id} doesn't have a collection with title Glaciers"

    async def test_clash_after_first_position(self, map_service, user_id, map_id):
        await add_collections(map_service, user_id, map_id, "Waterfalls", "Glaciers", "Beaches")

        with pytest.raises(DuplicateResourceError):
            await map_service.update_collection(user_id, map_id, "Waterfalls", "Beaches")

    async def test_clash_with_first_position_is_missed_by_default(self, map_service, user_id, map_id):
        await add_collections(map_service, user_id, map_id, "Waterfalls", "Glaciers")

        pin_map = await map_service.update_collection(user_id, map_id, "Glaciers", "Waterfalls")
        assert titles(pin_map) == ["Waterfalls", "Waterfalls"]

    async def test_clash_with_first_position_when_strict(self, make_services, user_id, map_id):
        _, maps, _ = make_services(strict_collection_rename_check=True)
        await add_collections(maps, user_id, map_id, "Waterfalls", "Glaciers")

        with pytest.raises(DuplicateResourceError):
            await maps.update_collection(user_id, map_id, "Glaciers", "Waterfalls")

    async def test_rename_to_same_title_when_strict(self, make_services, user_id, map_id):
        _, maps, _ = make_services(strict_collection_rename_check=True)
        await add_collections(maps, user_id, map_id, "Waterfalls", "Glaciers")

        pin_map = await maps.update_collection(user_id, map_id, "Glaciers", "Glaciers")
        assert titles(pin_map) == ["Waterfalls", "Glaciers"]

    async def test_pins_follow_the_rename(self, map_service, pin_service, user_id, map_id, pin_data):
        await add_collections(map_service, user_id, map_id, "Waterfalls")
        pin_id = await pin_service.create_pin(user_id, map_id, "Waterfalls", pin_data)

        pin_map = await map_service.update_collection(user_id, map_id, "Waterfalls", "Fossar")
        assert pin_map["collections"] == [{"title": "Fossar", "pins": [pin_id]}]


class TestRemoveCollection:
    async def test_removes_collection_and_its_pins(
        self, session, map_service, pin_service, user_id, map_id, pin_data
    ):
        await add_collections(map_service, user_id, map_id, "Waterfalls", "Glaciers")
        removed_pin = await pin_service.create_pin(user_id, map_id, "Waterfalls", pin_data)
        kept_pin = await pin_service.create_pin(user_id, map_id, "Glaciers", pin_data)

        pin_map = await map_service.remove_collection(user_id, map_id, "Waterfalls")
        assert pin_map["collections"] == [{"title": "Glaciers", "pins": [kept_pin]}]

        pins = PinRepository(session)
        assert await pins.get(uuid.UUID(removed_pin)) is None
        assert await pins.get(uuid.UUID(kept_pin)) is not None

        with pytest.raises(NotFoundError):
            await pin_service.update_pin(user_id, removed_pin, {"title": "Gone"})

    async def test_unknown_collection(self, map_service, user_id, map_id):
        with pytest.raises(NotFoundError):
            await map_service.remove_collection(user_id, map_id, "Waterfalls")

    async def test_other_user(self, map_service, user_id, other_user_id, map_id):
        await add_collections(map_service, user_id, map_id, "Waterfalls")
        with pytest.raises(OwnershipError):
            await map_service.remove_collection(other_user_id, map_id, "Waterfalls")
