import json

import httpx
import pytest

from orchid.core.errors import FixtureUnavailableError, UnknownEndpointError
from orchid.services.data_loader import FixtureStore, unwrap_items
from orchid.services.product_service import ProductService
from orchid.services.randomizer import Randomizer


@pytest.mark.asyncio
async def test_unreachable_api_falls_back_to_fixture(make_loader, users_fixture):
    loader = make_loader()
    assert await loader.fetch_data("users") == users_fixture


@pytest.mark.asyncio
async def test_network_error_falls_back_to_fixture(make_loader, users_fixture):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    loader = make_loader(refuse)
    assert await loader.fetch_data("users") == users_fixture


@pytest.mark.asyncio
async def test_invalid_json_falls_back_to_fixture(make_loader, products_fixture):
    loader = make_loader(lambda request: httpx.Response(200, content=b"<html>"))
    assert await loader.fetch_data("products") == products_fixture


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[1, None], {"data": {"items": ["x"]}}, {"data": [{"id": 1}, "x"]}])
@pytest.mark.parametrize("randomize", [False, True])
async def test_non_record_items_fall_back_to_fixture(make_loader, users_fixture, body, randomize):
    loader = make_loader(lambda request: httpx.Response(200, json=body), RANDOMIZE=randomize)

    records = await loader.fetch_data("users")

    assert [r["id"] for r in records] == [u["id"] for u in users_fixture]
    if not randomize:
        assert records == users_fixture


@pytest.mark.asyncio
async def test_remote_envelope_is_unwrapped(make_loader):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"success": True, "data": {"items": [{"id": 42}], "total": 1}})

    loader = make_loader(handler)
    records = await loader.fetch_data("users", params={"page": 1, "limit": 100})

    assert records == [{"id": 42}]
    assert str(seen[0].url) == "http://upstream.test/api/users?page=1&limit=100"


@pytest.mark.asyncio
async def test_unknown_endpoint_raises(make_loader):
    loader = make_loader()
    with pytest.raises(UnknownEndpointError) as exc_info:
        await loader.fetch_data("orders")
    assert str(exc_info.value) == "Unknown endpoint: orders"


@pytest.mark.asyncio
async def test_missing_fixture_directory_yields_empty_list(make_loader, tmp_path):
    loader = make_loader(DATA_DIR=tmp_path / "nowhere")
    assert await loader.fetch_data("products") == []


@pytest.mark.asyncio
async def test_randomized_view_keeps_ids_and_replaces_soft_fields(make_loader, users_fixture):
    loader = make_loader(RANDOMIZE=True)

    records = await loader.fetch_data("users")

    assert [r["id"] for r in records] == [u["id"] for u in users_fixture]
    assert all(r["email"] != u["email"] for r, u in zip(records, users_fixture))
    assert [r["avatar"] for r in records] == [u["avatar"] for u in users_fixture]


@pytest.mark.asyncio
async def test_fixture_is_not_mutated_by_callers_or_randomizer(make_loader, products_fixture):
    loader = make_loader(RANDOMIZE=True)

    randomized = await loader.fetch_data("products")
    randomized[0]["name"] = "changed"

    assert loader.fixture("products") == products_fixture


@pytest.mark.asyncio
async def test_product_service_reads_fixture(make_loader, products_fixture):
    loader = make_loader()
    assert await ProductService(loader).get_products() == products_fixture


def test_snapshots_are_independent_copies(tmp_path):
    (tmp_path / "users.json").write_text(json.dumps([{"id": 1, "name": "A"}]), encoding="utf-8")
    store = FixtureStore(tmp_path)

    first = store.snapshot("users")
    first[0]["name"] = "B"

    assert store.snapshot("users") == [{"id": 1, "name": "A"}]


def test_non_array_fixture_is_unavailable(tmp_path):
    (tmp_path / "users.json").write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(FixtureUnavailableError):
        FixtureStore(tmp_path).snapshot("users")


def test_unwrap_items_accepts_all_envelopes():
    assert unwrap_items([{"id": 1}]) == [{"id": 1}]
    assert unwrap_items({"data": [{"id": 1}]}) == [{"id": 1}]
    assert unwrap_items({"data": {"items": [{"id": 1}]}}) == [{"id": 1}]


def test_randomizer_is_pure_and_seeded():
    records = [{"id": 1, "name": "Neil Sims", "price": "149"}]

    first = Randomizer(seed=7).randomize("users", records)
    second = Randomizer(seed=7).randomize("users", records)

    assert records == [{"id": 1, "name": "Neil Sims", "price": "149"}]
    assert first == second
    assert first[0]["id"] == 1
    assert first[0]["price"] == "149"


def test_randomized_prices_stay_numeric_strings():
    [product] = Randomizer(seed=3).randomize("products", [{"id": 1, "price": "10"}])
    assert isinstance(product["price"], str)
    assert float(product["price"]) >= 1


def test_unknown_endpoint_is_left_alone():
    randomizer = Randomizer(seed=1)
    assert randomizer.soft_fields("orders") == []
    assert randomizer.randomize("orders", [{"id": 1}]) == [{"id": 1}]
