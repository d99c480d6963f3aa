import httpx
import pytest

from orchid.services.user_service import UserService


@pytest.mark.asyncio
async def test_get_users_requests_first_hundred(make_loader):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1, "name": "Neil Sims"}])

    users = await UserService(make_loader(handler)).get_users()

    assert users == [{"id": 1, "name": "Neil Sims"}]
    assert seen[0].url.params["limit"] == "100"


@pytest.mark.asyncio
async def test_get_users_falls_back_to_fixture(make_loader, users_fixture):
    assert await UserService(make_loader()).get_users() == users_fixture


@pytest.mark.asyncio
async def test_paginated_uses_remote_envelope(make_loader):
    payload = {"data": {"items": [{"id": 6}], "total": 40, "page": 2, "limit": 5}}
    result = await UserService(make_loader(lambda r: httpx.Response(200, json=payload))).get_users_paginated(2, 5)

    assert result.data == [{"id": 6}]
    assert (result.total, result.page, result.limit) == (40, 2, 5)


@pytest.mark.asyncio
async def test_paginated_fallback_slices_fixture(make_loader, users_fixture):
    result = await UserService(make_loader()).get_users_paginated(page=2, limit=5)

    assert result.data == users_fixture[5:10]
    assert result.total == len(users_fixture)
    assert (result.page, result.limit) == (2, 5)


@pytest.mark.asyncio
async def test_paginated_fallback_past_the_end_is_empty(make_loader, users_fixture):
    result = await UserService(make_loader()).get_users_paginated(page=50, limit=10)

    assert result.data == []
    assert result.total == len(users_fixture)


@pytest.mark.asyncio
async def test_get_user_by_id_unwraps_record(make_loader):
    def handler(request):
        assert request.url.path == "/api/users/3"
        return httpx.Response(200, json={"success": True, "data": {"id": 3, "name": "Michael Gough"}})

    user = await UserService(make_loader(handler)).get_user_by_id(3)
    assert user == {"id": 3, "name": "Michael Gough"}


@pytest.mark.asyncio
async def test_get_user_by_id_404_is_none(make_loader):
    service = UserService(make_loader(lambda r: httpx.Response(404)))
    assert await service.get_user_by_id(1) is None


@pytest.mark.asyncio
async def test_get_user_by_id_falls_back_to_fixture(make_loader, users_fixture):
    service = UserService(make_loader())

    assert await service.get_user_by_id(2) == users_fixture[1]
    assert await service.get_user_by_id("2") == users_fixture[1]
    assert await service.get_user_by_id(999) is None


@pytest.mark.asyncio
async def test_paginated_non_record_items_fall_back_to_fixture(make_loader, users_fixture):
    service = UserService(make_loader(lambda r: httpx.Response(200, json=[1, None]), RANDOMIZE=True))

    result = await service.get_users_paginated(page=1, limit=5)

    assert [u["id"] for u in result.data] == [u["id"] for u in users_fixture[:5]]
    assert result.total == len(users_fixture)
