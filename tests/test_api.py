import uuid


PIN = {
    "title": "Skógafoss",
    "description": "Waterfall on the Skógá river",
    "coordinates": {"latitude": 63.5321, "longitude": -19.5114},
}


async def create_map(client, headers, **body):
    response = await client.post("/maps", json={"title": "Iceland", **body}, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["service"] == "photopin"

    async def test_live(self, client):
        assert (await client.get("/live")).json() == {"status": "alive"}

    async def test_ready(self, client):
        assert (await client.get("/ready")).json() == {"status": "ready"}


class TestUsers:
    async def test_register_and_authenticate(self, client):
        response = await client.post(
            "/users",
            json={"name": "Ansel", "surname": "Adams", "email": "ansel@mail.com", "password": "yosemite"},
        )
        assert response.status_code == 201
        user_id = response.json()["id"]

        response = await client.post("/auth", json={"email": "ansel@mail.com", "password": "yosemite"})
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == user_id
        assert body["token_type"] == "bearer"
        assert body["access_token"]

    async def test_duplicate_registration(self, client, auth_headers):
        response = await client.post(
            "/users",
            json={"name": "Ansel", "surname": "Adams", "email": "ansel@mail.com", "password": "x"},
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_wrong_password(self, client, auth_headers):
        response = await client.post("/auth", json={"email": "ansel@mail.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "wrong credentials"

    async def test_invalid_body(self, client):
        response = await client.post("/users", json={"name": "Ansel"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_me_requires_token(self, client):
        response = await client.get("/users/me")
        assert response.status_code == 401

    async def test_me_rejects_bad_token(self, client):
        response = await client.get("/users/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_me(self, client, auth_headers):
        response = await client.get("/users/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "ansel@mail.com"
        assert "password_hash" not in response.json()

    async def test_update_returns_previous(self, client, auth_headers):
        response = await client.patch("/users/me", json={"name": "Easton"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Ansel"

        response = await client.get("/users/me", headers=auth_headers)
        assert response.json()["name"] == "Easton"

    async def test_remove(self, client, auth_headers):
        await create_map(client, auth_headers)

        response = await client.delete("/users/me", headers=auth_headers)
        assert response.status_code == 200

        response = await client.get("/users/me", headers=auth_headers)
        assert response.status_code == 404


class TestMaps:
    async def test_create_and_list(self, client, auth_headers):
        map_id = await create_map(client, auth_headers, is_public=True)

        response = await client.get("/maps", headers=auth_headers)
        assert response.status_code == 200
        assert [m["id"] for m in response.json()] == [map_id]

    async def test_unknown_map(self, client, auth_headers):
        response = await client.get(f"/maps/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_update(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)
        response = await client.patch(
            f"/maps/{map_id}", json={"title": "Ísland", "is_public": True}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Ísland"
        assert response.json()["is_public"] is True

    async def test_private_map_of_other_user(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)

        await client.post(
            "/users",
            json={"name": "Vivian", "surname": "Maier", "email": "vivian@mail.com", "password": "chicago"},
        )
        token = (await client.post("/auth", json={"email": "vivian@mail.com", "password": "chicago"})).json()
        other = {"Authorization": f"Bearer {token['access_token']}"}

        response = await client.get(f"/maps/{map_id}", headers=other)
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "OWNERSHIP_ERROR"

    async def test_remove(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)

        response = await client.delete(f"/maps/{map_id}", headers=auth_headers)
        assert response.status_code == 200
        assert (await client.get(f"/maps/{map_id}", headers=auth_headers)).status_code == 404


class TestCollectionsAndPins:
    async def test_lifecycle(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)

        response = await client.post(
            f"/maps/{map_id}/collections", json={"title": "Waterfalls"}, headers=auth_headers
        )
        assert response.status_code == 201
        assert response.json() == {"count": 1}

        response = await client.post(
            f"/maps/{map_id}/collections/Waterfalls/pins", json=PIN, headers=auth_headers
        )
        assert response.status_code == 201
        pin_id = response.json()["id"]

        response = await client.get(f"/maps/{map_id}", headers=auth_headers)
        pins = response.json()["collections"][0]["pins"]
        assert pins[0]["id"] == pin_id
        assert pins[0]["coordinates"] == PIN["coordinates"]

        response = await client.patch(
            f"/pins/{pin_id}", json={"title": "Skógafoss at dusk"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Skógafoss at dusk"
        assert response.json()["description"] is None

        response = await client.patch(
            f"/maps/{map_id}/collections/Waterfalls", json={"title": "Fossar"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["collections"] == [{"title": "Fossar", "pins": [pin_id]}]

        response = await client.delete(f"/pins/{pin_id}", headers=auth_headers)
        assert response.status_code == 204

        response = await client.delete(f"/pins/{pin_id}", headers=auth_headers)
        assert response.status_code == 404

        response = await client.delete(f"/maps/{map_id}/collections/Fossar", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["collections"] == []

    async def test_out_of_range_coordinates(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)
        await client.post(f"/maps/{map_id}/collections", json={"title": "Waterfalls"}, headers=auth_headers)

        response = await client.post(
            f"/maps/{map_id}/collections/Waterfalls/pins",
            json={**PIN, "coordinates": {"latitude": 91, "longitude": 0}},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALUE_ERROR"
        assert response.json()["error"]["details"]["field"] == "latitude"

    async def test_unknown_collection(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)
        response = await client.post(
            f"/maps/{map_id}/collections/Nope/pins", json=PIN, headers=auth_headers
        )
        assert response.status_code == 404

    async def test_title_with_slash(self, client, auth_headers):
        map_id = await create_map(client, auth_headers)
        response = await client.post(
            f"/maps/{map_id}/collections", json={"title": "2019/2020"}, headers=auth_headers
        )
        assert response.status_code == 201

        response = await client.post(
            f"/maps/{map_id}/collections/2019%2F2020/pins", json=PIN, headers=auth_headers
        )
        assert response.status_code == 201
        pin_id = response.json()["id"]

        response = await client.patch(
            f"/maps/{map_id}/collections/2019%2F2020", json={"title": "2021/22"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["collections"] == [{"title": "2021/22", "pins": [pin_id]}]

        response = await client.delete(f"/maps/{map_id}/collections/2021/22", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["collections"] == []
