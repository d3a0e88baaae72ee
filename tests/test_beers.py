# tests/test_beers.py
import pytest
from httpx import AsyncClient

from beerstock.core.config import settings

BEERS_URL = "/api/v1/beers"


def _payload(**overrides) -> dict:
    data = {"name": "Brahma", "brand": "Ambev", "max": 50, "quantity": 10, "type": "LAGER"}
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_create_beer(client: AsyncClient):
    resp = await client.post(BEERS_URL, json=_payload())
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["id"] >= 1
    assert body["name"] == "Brahma"
    assert body["quantity"] == 10
    assert body["type"] == "LAGER"


@pytest.mark.asyncio
async def test_create_duplicate_returns_400(client: AsyncClient, make_beer):
    make_beer(name="Brahma")
    resp = await client.post(BEERS_URL, json=_payload())
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Beer with name Brahma already registered in the system."


@pytest.mark.asyncio
async def test_create_rejects_quantity_above_max(client: AsyncClient):
    resp = await client.post(BEERS_URL, json=_payload(max=5, quantity=6))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_by_name_and_list(client: AsyncClient, make_beer):
    make_beer(name="Brahma")
    make_beer(name="Skol")

    resp = await client.get(f"{BEERS_URL}/Skol")
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Skol"

    resp = await client.get(BEERS_URL)
    assert resp.status_code == 200
    assert [b["name"] for b in resp.json()] == ["Brahma", "Skol"]


@pytest.mark.asyncio
async def test_get_unknown_name_returns_404(client: AsyncClient):
    resp = await client.get(f"{BEERS_URL}/Unknown")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Beer not found with name Unknown"


@pytest.mark.asyncio
async def test_delete_beer(client: AsyncClient, make_beer):
    beer = make_beer()
    resp = await client.delete(f"{BEERS_URL}/{beer.id}")
    assert resp.status_code == 204

    resp = await client.delete(f"{BEERS_URL}/{beer.id}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_decrement_within_stock(client: AsyncClient, make_beer):
    beer = make_beer(quantity=10)
    resp = await client.patch(f"{BEERS_URL}/{beer.id}/decrement", json={"quantity": 5})
    assert resp.status_code == 200, resp.text
    assert resp.json()["quantity"] == 5


@pytest.mark.asyncio
async def test_decrement_below_min_returns_400(client: AsyncClient, make_beer):
    beer = make_beer(quantity=10)
    resp = await client.patch(f"{BEERS_URL}/{beer.id}/decrement", json={"quantity": 11})
    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == (
        f"Beers with {beer.id} ID to decrement informed is bellow the min stock expected: 11"
    )
    assert body["beer_id"] == beer.id
    assert body["quantity"] == 11

    resp = await client.get(f"{BEERS_URL}/{beer.name}")
    assert resp.json()["quantity"] == 10


@pytest.mark.asyncio
async def test_decrement_honours_configured_floor(client: AsyncClient, make_beer, monkeypatch):
    monkeypatch.setattr(settings, "BEER_MIN_STOCK", 2)
    beer = make_beer(quantity=5)

    resp = await client.patch(f"{BEERS_URL}/{beer.id}/decrement", json={"quantity": 4})
    assert resp.status_code == 400
    assert resp.json()["quantity"] == 4

    resp = await client.patch(f"{BEERS_URL}/{beer.id}/decrement", json={"quantity": 3})
    assert resp.status_code == 200, resp.text
    assert resp.json()["quantity"] == 2


@pytest.mark.asyncio
async def test_decrement_requires_positive_quantity(client: AsyncClient, make_beer):
    beer = make_beer()
    resp = await client.patch(f"{BEERS_URL}/{beer.id}/decrement", json={"quantity": -1})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_decrement_unknown_beer_returns_404(client: AsyncClient):
    resp = await client.patch(f"{BEERS_URL}/999/decrement", json={"quantity": 1})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Beer not found with ID 999"


@pytest.mark.asyncio
async def test_increment_and_capacity(client: AsyncClient, make_beer):
    beer = make_beer(max=50, quantity=10)

    resp = await client.patch(f"{BEERS_URL}/{beer.id}/increment", json={"quantity": 40})
    assert resp.status_code == 200, resp.text
    assert resp.json()["quantity"] == 50

    resp = await client.patch(f"{BEERS_URL}/{beer.id}/increment", json={"quantity": 1})
    assert resp.status_code == 400
    assert "exceeds the max stock capacity: 1" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_responses_carry_request_id(client: AsyncClient):
    resp = await client.get(BEERS_URL, headers={"X-Request-ID": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"

    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["x-request-id"]


@pytest.mark.asyncio
async def test_metrics_endpoint(client: AsyncClient):
    await client.get(BEERS_URL)
    resp = await client.get("/metrics")
    assert resp.status_code == 200
    assert "beerstock_http_requests_total" in resp.text
