from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from tests.factories import announcement, cpv, factor


@pytest.mark.asyncio
async def test_listing_parses_query_string(client, seed):
    await seed(
        announcement(1, base_price=Decimal("1000"), entity_distrito="Lisboa"),
        announcement(2, base_price=Decimal("3000"), entity_distrito="Lisboa"),
        announcement(3, base_price=Decimal("2000"), entity_distrito="Porto"),
        cpv(1, "72100000"),
    )
    response = await client.get("/v1/procurements/", params={
        "district": "lisboa",
        "priceSortOrder": "desc",
        "minPrice": "500",
        "limit": "10",
    })
    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["data"]] == [2, 1]
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 2, "pages": 1}
    first = body["data"][1]
    assert first["cpv_codes"] == ["72100000"]
    assert first["effective_price"] == 1000.0
    assert first["criteria_type"] == "outros"


@pytest.mark.asyncio
async def test_listing_malformed_numbers_fall_back_to_defaults(client, seed):
    await seed(announcement(1), announcement(2, base_price=Decimal("10")))
    response = await client.get("/v1/procurements/", params={
        "page": "abc",
        "limit": "-5",
        "minPrice": "muito",
        "minDate": "ontem",
        "dateSortOrder": "sideways",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"page": 1, "limit": 21, "total": 2, "pages": 1}
    assert len(body["data"]) == 2


@pytest.mark.asyncio
async def test_listing_include_flags(client, seed):
    await seed(
        announcement(1, expired=True),
        announcement(2, expired=False),
        announcement(3, expired=None),
    )
    default = await client.get("/v1/procurements/")
    assert sorted(item["id"] for item in default.json()["data"]) == [2, 3]

    active_only = await client.get("/v1/procurements/", params={"includeNA": "false"})
    assert [item["id"] for item in active_only.json()["data"]] == [2]

    expired = await client.get("/v1/procurements/", params={"includeExpired": "true"})
    assert [item["id"] for item in expired.json()["data"]] == [1]


@pytest.mark.asyncio
async def test_listing_criteria_filter(client, seed):
    await seed(
        announcement(1), announcement(2),
        factor(1, "Preço"), factor(1, "Preço"), factor(1, "preço"),
        factor(2, "Preço"), factor(2, "Qualidade"),
    )
    response = await client.get("/v1/procurements/", params={"criteria": "precos"})
    body = response.json()
    assert [item["id"] for item in body["data"]] == [1]
    assert body["data"][0]["criteria_type"] == "precos"
    assert body["pagination"]["total"] == 2


@pytest.mark.asyncio
async def test_listing_database_failure_returns_500(client):
    with patch(
        "concursos.api.v1.endpoints.procurements.list_announcements",
        new=AsyncMock(side_effect=RuntimeError("connection reset")),
    ):
        response = await client.get("/v1/procurements/")
    assert response.status_code == 500
    assert response.json()["detail"] == {
        "message": "Failed to fetch procurements",
        "error": "connection reset",
    }


@pytest.mark.asyncio
async def test_detail(client, seed):
    await seed(
        announcement(7, application_deadline="15-04-2025 17:00", publication_date=datetime(2025, 3, 1)),
        cpv(7, "72000000", 250),
        factor(7, "Preço"),
    )
    response = await client.get("/v1/procurements/7")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 7
    assert body["effective_price"] == 250.0
    assert body["base_price"] is None
    assert body["cpv_codes"] == ["72000000"]
    assert body["criteria_type"] == "precos"
    assert body["application_deadline"] == "2025-04-15T17:00:00"


@pytest.mark.asyncio
async def test_detail_keeps_unparseable_deadline(client, seed):
    await seed(announcement(8, application_deadline="a definir"))
    response = await client.get("/v1/procurements/8")
    assert response.json()["application_deadline"] == "a definir"


@pytest.mark.asyncio
async def test_detail_invalid_and_missing_ids(client):
    invalid = await client.get("/v1/procurements/abc")
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Invalid announcement ID"

    missing = await client.get("/v1/procurements/999")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Procurement not found"


@pytest.mark.asyncio
async def test_adjudication_factors(client, seed):
    await seed(
        announcement(1),
        factor(1, "Preço", percentage=60),
        factor(1, "Qualidade", percentage=40),
    )
    response = await client.get("/v1/procurements/1/adjudication-factors")
    assert response.status_code == 200
    factors = response.json()["factors"]
    assert [f["factor_name"] for f in factors] == ["Preço", "Qualidade"]
    assert [f["percentage"] for f in factors] == [60.0, 40.0]


@pytest.mark.asyncio
async def test_adjudication_factors_for_invalid_id(client):
    response = await client.get("/v1/procurements/abc/adjudication-factors")
    assert response.status_code == 200
    assert response.json() == {"factors": []}


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"page": "99999999999999999999"},
    {"limit": "99999999999999999999"},
    {"page": "1000001"},
    {"limit": "101"},
])
async def test_listing_out_of_range_paging_falls_back_to_defaults(client, seed, params):
    await seed(announcement(1), announcement(2))
    response = await client.get("/v1/procurements/", params=params)
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"page": 1, "limit": 21, "total": 2, "pages": 1}
    assert [item["id"] for item in body["data"]] == [2, 1]


@pytest.mark.asyncio
async def test_listing_accepts_largest_page_size(client, seed):
    await seed(announcement(1))
    response = await client.get("/v1/procurements/", params={"limit": "100"})
    assert response.json()["pagination"]["limit"] == 100
