import pytest

from tests.factories import announcement


@pytest.mark.asyncio
async def test_archive_lifecycle(client, seed):
    await seed(announcement(1))

    status = await client.get("/v1/procurements/1/archive")
    assert status.json() == {"isArchived": False, "exists": False}

    archived = await client.post("/v1/procurements/1/archive", json={"isArchived": True})
    assert archived.status_code == 200
    assert archived.json() == {"success": True, "isArchived": True}

    status = await client.get("/v1/procurements/1/archive")
    assert status.json() == {"isArchived": True, "exists": True}

    listing = await client.get("/v1/procurements/", params={"showArchived": "true"})
    assert [item["id"] for item in listing.json()["data"]] == [1]

    unarchived = await client.post("/v1/procurements/1/archive", json={"isArchived": False})
    assert unarchived.json() == {"success": True, "isArchived": False}

    status = await client.get("/v1/procurements/1/archive")
    assert status.json() == {"isArchived": False, "exists": False}


@pytest.mark.asyncio
async def test_archive_twice_keeps_single_entry(client, seed):
    await seed(announcement(1))
    for _ in range(2):
        response = await client.post("/v1/procurements/1/archive", json={"isArchived": True})
        assert response.status_code == 200
    status = await client.get("/v1/procurements/1/archive")
    assert status.json() == {"isArchived": True, "exists": True}


@pytest.mark.asyncio
async def test_archive_invalid_id(client):
    get = await client.get("/v1/procurements/abc/archive")
    assert get.status_code == 400
    post = await client.post("/v1/procurements/abc/archive", json={"isArchived": True})
    assert post.status_code == 400


@pytest.mark.asyncio
async def test_archive_unknown_announcement(client):
    response = await client.post("/v1/procurements/42/archive", json={"isArchived": True})
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"isArchived": "yes"}, {"isArchived": 1}, {}])
async def test_archive_rejects_non_boolean(client, seed, body):
    await seed(announcement(1))
    response = await client.post("/v1/procurements/1/archive", json=body)
    assert response.status_code == 422
