import pytest
import pytest_asyncio

from tests.factories import announcement, cpv


@pytest_asyncio.fixture
async def catalog(seed):
    await seed(
        announcement(1, entity_distrito="Porto", object_main_contract_type="Empreitadas de Obras Públicas"),
        announcement(2, entity_distrito="Lisboa", object_main_contract_type="Aquisição de Bens Móveis"),
        announcement(3, entity_distrito="Braga", object_main_contract_type="Aquisição de Serviços"),
        announcement(4, entity_distrito="  ", object_main_contract_type=None),
        announcement(5, entity_distrito="Lisboa"),
        cpv(1, "45210000"),
        cpv(2, "45000000"),
        cpv(3, "72000000"),
        cpv(5, "45000000"),
    )


@pytest.mark.asyncio
async def test_districts(client, catalog):
    response = await client.get("/v1/districts")
    assert response.json() == ["Braga", "Lisboa", "Porto"]


@pytest.mark.asyncio
async def test_districts_for_cpv_family(client, catalog):
    response = await client.get("/v1/districts", params={"cpv": "45000000"})
    assert response.json() == ["Lisboa", "Porto"]


@pytest.mark.asyncio
async def test_districts_for_unknown_cpv(client, catalog):
    response = await client.get("/v1/districts", params={"cpv": "99999999"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_contract_types(client, catalog):
    response = await client.get("/v1/contract-types")
    assert response.json() == [
        "Aquisição de Bens Móveis",
        "Aquisição de Serviços",
        "Empreitadas de Obras Públicas",
    ]

    exact = await client.get("/v1/contract-types", params={"cpv": "45210000"})
    assert exact.json() == ["Empreitadas de Obras Públicas"]

    everything = await client.get("/v1/contract-types", params={"cpv": "all"})
    assert everything.json() == response.json()


@pytest.mark.asyncio
async def test_cpvs_for_ids(client, catalog):
    response = await client.get("/v1/cpvs", params={"ids": "1, 2,x,5"})
    assert response.json() == {"cpvs": ["45000000", "45210000"]}


@pytest.mark.asyncio
async def test_cpvs_without_ids(client, catalog):
    assert (await client.get("/v1/cpvs")).json() == {"cpvs": []}
    assert (await client.get("/v1/cpvs", params={"ids": "a,b"})).json() == {"cpvs": []}


@pytest.mark.asyncio
async def test_cpvs_accepts_test_ids_parameter(client, catalog):
    response = await client.get("/v1/cpvs", params={"testIds": "3"})
    assert response.json() == {"cpvs": ["72000000"]}


@pytest.mark.asyncio
async def test_cpvs_merges_both_id_parameters(client, catalog):
    response = await client.get("/v1/cpvs", params={"ids": "1", "testIds": "3"})
    assert response.json() == {"cpvs": ["45210000", "72000000"]}
