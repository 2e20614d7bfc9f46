import uuid

import pytest

from photopin.shared.core.exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    LogicError,
    NotFoundError,
    OwnershipError,
    RequirementError,
)


@pytest.fixture
async def collection(map_service, user_id, map_id):
    await map_service.create_collection(user_id, map_id, "Waterfalls")
    return "Waterfalls"


@pytest.fixture
async def pin_id(pin_service, user_id, map_id, collection, pin_data):
    return await pin_service.create_pin(user_id, map_id, collection, pin_data)


class TestCreate:
    async def test_pin_is_appended_to_collection(self, map_service, pin_service, user_id, map_id, collection, pin_data):
        first = await pin_service.create_pin(user_id, map_id, collection, pin_data)
        second = await pin_service.create_pin(user_id, map_id, collection, pin_data)

        maps = await map_service.retrieve_user_maps(user_id)
        assert maps[0]["collections"][0]["pins"] == [first, second]

    async def test_pin_belongs_to_map_author(self, map_service, user_id, map_id, pin_id):
        pin_map = await map_service.retrieve_user_map(user_id, map_id)
        pin = pin_map["collections"][0]["pins"][0]
        assert pin["author_id"] == user_id
        assert pin["map_id"] == map_id
        assert pin["best_time_of_day"] == "sunset"
        assert pin["photography_tips"] is None

    async def test_unknown_collection(self, pin_service, user_id, map_id, collection, pin_data):
        with pytest.raises(NotFoundError) as exc:
            await pin_service.create_pin(user_id, map_id, "Glaciers", pin_data)
        assert str(exc.value) == "collection Glaciers not found"

    async def test_other_users_map(self, pin_service, other_user_id, map_id, collection, pin_data):
        with pytest.raises(OwnershipError):
            await pin_service.create_pin(other_user_id, map_id, collection, pin_data)

    async def test_missing_coordinates(self, pin_service, user_id, map_id, collection, pin_data):
        del pin_data["coordinates"]
        with pytest.raises(RequirementError):
            await pin_service.create_pin(user_id, map_id, collection, pin_data)

    async def test_non_numeric_latitude(self, pin_service, user_id, map_id, collection, pin_data):
        pin_data["coordinates"]["latitude"] = "63.5"
        with pytest.raises(ArgumentTypeError):
            await pin_service.create_pin(user_id, map_id, collection, pin_data)

    @pytest.mark.parametrize("coordinates", [
        {"latitude": 90.5, "longitude": 0},
        {"latitude": 0, "longitude": -180.5},
    ])
    async def test_out_of_range(self, pin_service, user_id, map_id, collection, pin_data, coordinates):
        pin_data["coordinates"] = coordinates
        with pytest.raises(ArgumentValueError):
            await pin_service.create_pin(user_id, map_id, collection, pin_data)

    async def test_missing_title(self, pin_service, user_id, map_id, collection, pin_data):
        del pin_data["title"]
        with pytest.raises(RequirementError):
            await pin_service.create_pin(user_id, map_id, collection, pin_data)


class TestUpdate:
    async def test_full_overwrite_clears_missing_fields(self, pin_service, user_id, pin_id):
        pin = await pin_service.update_pin(user_id, pin_id, {"title": "Skógafoss at dusk"})

        assert pin["title"] == "Skógafoss at dusk"
        assert pin["description"] is None
        assert pin["best_time_of_day"] is None
        assert pin["coordinates"] == {"latitude": 63.5321, "longitude": -19.5114}

    async def test_full_overwrite_requires_title(self, pin_service, user_id, pin_id):
        with pytest.raises(RequirementError):
            await pin_service.update_pin(user_id, pin_id, {"description": "Misty"})

    async def test_partial_update_keeps_missing_fields(self, make_services, user_id, pin_id):
        _, _, pins = make_services(partial_pin_update=True)

        pin = await pins.update_pin(user_id, pin_id, {"description": "Misty"})
        assert pin["title"] == "Skógafoss"
        assert pin["description"] == "Misty"
        assert pin["best_time_of_day"] == "sunset"

    async def test_partial_update_cannot_clear_title(self, make_services, user_id, pin_id):
        _, _, pins = make_services(partial_pin_update=True)
        with pytest.raises(RequirementError):
            await pins.update_pin(user_id, pin_id, {"title": None})

    async def test_coordinates(self, pin_service, user_id, pin_id):
        pin = await pin_service.update_pin(
            user_id, pin_id, {"title": "Skógafoss", "coordinates": {"latitude": 63.53, "longitude": -19.51}}
        )
        assert pin["coordinates"] == {"latitude": 63.53, "longitude": -19.51}

    async def test_unknown_pin(self, pin_service, user_id):
        with pytest.raises(NotFoundError):
            await pin_service.update_pin(user_id, str(uuid.uuid4()), {"title": "x"})

    async def test_other_user(self, pin_service, other_user_id, pin_id):
        with pytest.raises(OwnershipError) as exc:
            await pin_service.update_pin(other_user_id, pin_id, {"title": "Mine"})
        assert str(exc.value) == f"pin {pin_id} is not from user {other_user_id}"


class TestRemove:
    async def test_second_removal_fails(self, pin_service, user_id, pin_id):
        await pin_service.remove_pin(user_id, pin_id)

        with pytest.raises(NotFoundError) as exc:
            await pin_service.remove_pin(user_id, pin_id)
        assert isinstance(exc.value, LogicError)

    async def test_other_user_cannot_remove(self, pin_service, other_user_id, pin_id):
        with pytest.raises(NotFoundError):
            await pin_service.remove_pin(other_user_id, pin_id)

    async def test_reference_kept_by_default(self, map_service, pin_service, user_id, pin_id):
        await pin_service.remove_pin(user_id, pin_id)

        maps = await map_service.retrieve_user_maps(user_id)
        assert maps[0]["collections"][0]["pins"] == [pin_id]

    async def test_reference_pruned_when_enabled(self, make_services, user_id, pin_id):
        _, maps, pins = make_services(prune_pin_reference_on_remove=True)
        await pins.remove_pin(user_id, pin_id)

        listed = await maps.retrieve_user_maps(user_id)
        assert listed[0]["collections"][0]["pins"] == []
