import pytest
from httpx import AsyncClient

USERS_URL = "http://testserver/api/v1/users/"


def links_by_rel(data):
    return {link["rel"]: link["href"] for link in data["links"]}


@pytest.mark.asyncio
async def test_root_health_check(async_client: AsyncClient):
    response = await async_client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_list_users_middle_page(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"page": 2, "size": 5})
    assert response.status_code == 200
    data = response.json()

    assert data["number"] == 2
    assert data["size"] == 5
    assert data["totalPages"] == 5
    assert data["totalElements"] == 23
    assert data["numberOfElements"] == 5
    assert data["sort"] is None
    assert len(data["content"]) == 5
    assert [link["rel"] for link in data["links"]] == ["previous", "next", "first", "last", "self"]
    assert links_by_rel(data) == {
        "previous": f"{USERS_URL}?page=1&size=5",
        "next": f"{USERS_URL}?page=3&size=5",
        "first": f"{USERS_URL}?page=0&size=5",
        "last": f"{USERS_URL}?page=4&size=5",
        "self": f"{USERS_URL}?page=2&size=5",
    }


@pytest.mark.asyncio
async def test_list_users_defaults(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/")
    assert response.status_code == 200
    data = response.json()

    assert data["number"] == 0
    assert data["size"] == 20
    assert data["totalPages"] == 2
    assert links_by_rel(data)["next"] == f"{USERS_URL}?page=1&size=20"
    assert "previous" not in links_by_rel(data)


@pytest.mark.asyncio
async def test_search_is_kept_on_links(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"search": "alice", "size": 5})
    assert response.status_code == 200
    data = response.json()

    assert data["totalElements"] == 1
    assert data["content"][0]["email"] == "alice@example.com"
    assert [link["rel"] for link in data["links"]] == ["first", "last", "self"]
    for link in data["links"]:
        assert link["href"].startswith(f"{USERS_URL}?search=alice&page=0&size=5")


@pytest.mark.asyncio
async def test_sort_is_applied_and_kept_on_links(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"sort": "name,DESC", "size": 5})
    assert response.status_code == 200
    data = response.json()

    assert data["content"][0]["name"] == "Zoe Zimmer"
    assert data["sort"] == [{"property": "name", "direction": "DESC"}]
    assert links_by_rel(data)["next"] == f"{USERS_URL}?page=1&size=5&sort=name,desc"


@pytest.mark.asyncio
async def test_no_matches_has_no_last_link(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"search": "nobody"})
    assert response.status_code == 200
    data = response.json()

    assert data["totalPages"] == 0
    assert data["content"] == []
    assert [link["rel"] for link in data["links"]] == ["first", "self"]


@pytest.mark.asyncio
async def test_malformed_sort_is_rejected(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"sort": "name,sideways"})
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert data["code"] == "MALFORMED_SORT"


@pytest.mark.asyncio
async def test_unknown_sort_property_is_rejected(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"sort": "password,asc"})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "INVALID_SORT_PROPERTY"
    assert data["details"]["property"] == "password"


@pytest.mark.asyncio
async def test_invalid_page_size(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/", params={"size": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_user_summaries(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/summary", params={"size": 3})
    assert response.status_code == 200
    data = response.json()

    assert set(data["content"][0]) == {"id", "name"}
    assert data["totalElements"] == 23
    assert links_by_rel(data)["last"] == "http://testserver/api/v1/users/summary?page=7&size=3"


@pytest.mark.asyncio
async def test_get_existing_user(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/user-001")
    assert response.status_code == 200
    assert response.json()["name"] == "Alice Anderson"


@pytest.mark.asyncio
async def test_get_nonexistent_user(async_client: AsyncClient):
    response = await async_client.get("/api/v1/users/user-999")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
