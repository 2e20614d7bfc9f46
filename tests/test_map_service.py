import uuid

import pytest

from photopin.shared.core.exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    NotFoundError,
    OwnershipError,
)
from photopin.shared.repositories import PinRepository


class TestCreate:
    async def test_new_map_is_empty_and_private(self, map_service, user_id):
        map_id = await map_service.create_map(user_id, "Iceland")

        pin_map = await map_service.retrieve_user_map(user_id, map_id)
        assert pin_map["title"] == "Iceland"
        assert pin_map["is_public"] is False
        assert pin_map["collections"] == []
        assert pin_map["author_id"] == user_id

    async def test_unknown_user(self, map_service):
        with pytest.raises(NotFoundError):
            await map_service.create_map(str(uuid.uuid4()), "Iceland")

    async def test_empty_title(self, map_service, user_id):
        with pytest.raises(ArgumentValueError):
            await map_service.create_map(user_id, "")

    async def test_is_public_must_be_bool(self, map_service, user_id):
        with pytest.raises(ArgumentTypeError):
            await map_service.create_map(user_id, "Iceland", is_public="yes")


class TestRetrieve:
    async def test_lists_only_own_maps(self, map_service, user_id, other_user_id, map_id):
        await map_service.create_map(user_id, "Norway", is_public=True)
        await map_service.create_map(other_user_id, "Chicago", is_public=True)

        maps = await map_service.retrieve_user_maps(user_id)
        assert {m["title"] for m in maps} == {"Iceland", "Norway"}

    async def test_malformed_user_id_lists_nothing(self, map_service, map_id):
        assert await map_service.retrieve_user_maps("not-a-uuid") == []

    async def test_private_map_of_other_user(self, map_service, other_user_id, map_id):
        with pytest.raises(OwnershipError):
            await map_service.retrieve_user_map(other_user_id, map_id)

    async def test_public_map_of_other_user(self, map_service, user_id, other_user_id):
        public_id = await map_service.create_map(other_user_id, "Chicago", is_public=True)
        pin_map = await map_service.retrieve_user_map(user_id, public_id)
        assert pin_map["title"] == "Chicago"

    async def test_unknown_map(self, map_service, user_id):
        with pytest.raises(NotFoundError) as exc:
            await map_service.retrieve_user_map(user_id, str(uuid.uuid4()))
        assert exc.value.status_code == 404

    async def test_pins_are_populated_in_order(self, map_service, pin_service, user_id, map_id, pin_data):
        await map_service.create_collection(user_id, map_id, "Waterfalls")
        first = await pin_service.create_pin(user_id, map_id, "Waterfalls", pin_data)
        second = await pin_service.create_pin(
            user_id, map_id, "Waterfalls", {**pin_data, "title": "Seljalandsfoss"}
        )

        pin_map = await map_service.retrieve_user_map(user_id, map_id)
        pins = pin_map["collections"][0]["pins"]
        assert [pin["id"] for pin in pins] == [first, second]
        assert pins[0]["coordinates"] == {"latitude": 63.5321, "longitude": -19.5114}
        assert pins[1]["title"] == "Seljalandsfoss"

    async def test_dangling_references_are_skipped(self, map_service, pin_service, user_id, map_id, pin_data):
        await map_service.create_collection(user_id, map_id, "Waterfalls")
        pin_id = await pin_service.create_pin(user_id, map_id, "Waterfalls", pin_data)
        await pin_service.remove_pin(user_id, pin_id)

        listed = await map_service.retrieve_user_maps(user_id)
        assert listed[0]["collections"][0]["pins"] == [pin_id]

        pin_map = await map_service.retrieve_user_map(user_id, map_id)
        assert pin_map["collections"][0]["pins"] == []


class TestUpdate:
    async def test_truthy_fields_are_applied(self, map_service, user_id, map_id):
        updated = await map_service.update_map(
            user_id, map_id, {"title": "Ísland", "description": "", "is_public": True}
        )
        assert updated["title"] == "Ísland"
        assert updated["description"] == "Ring road"
        assert updated["is_public"] is True

    async def test_other_user(self, map_service, user_id, other_user_id, map_id):
        with pytest.raises(OwnershipError) as exc:
            await map_service.update_map(other_user_id, map_id, {"title": "Mine"})
        assert str(exc.value) == f"map {map_id} is not from user {other_user_id}"

        pin_map = await map_service.retrieve_user_map(user_id, map_id)
        assert pin_map["title"] == "Iceland"

    async def test_unknown_map(self, map_service, user_id):
        with pytest.raises(NotFoundError):
            await map_service.update_map(user_id, str(uuid.uuid4()), {"title": "Mine"})


class TestRemove:
    async def test_removes_map_and_its_pins(
        self, session, map_service, pin_service, user_id, map_id, pin_data
    ):
        other_map = await map_service.create_map(user_id, "Norway")
        await map_service.create_collection(user_id, map_id, "Waterfalls")
        await map_service.create_collection(user_id, other_map, "Fjords")
        await pin_service.create_pin(user_id, map_id, "Waterfalls", pin_data)
        await pin_service.create_pin(user_id, other_map, "Fjords", pin_data)

        removed = await map_service.remove_map(user_id, map_id)
        assert removed["id"] == map_id

        pins = PinRepository(session)
        assert await pins.count({"map_id": uuid.UUID(map_id)}) == 0
        assert await pins.count({"map_id": uuid.UUID(other_map)}) == 1

        with pytest.raises(NotFoundError):
            await map_service.retrieve_user_map(user_id, map_id)

    async def test_other_user(self, map_service, other_user_id, map_id):
        with pytest.raises(OwnershipError):
            await map_service.remove_map(other_user_id, map_id)
