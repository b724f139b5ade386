"""End-to-end tests for the category endpoints."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from article_cms.main import create_app

BASE = "/api/v1/categories"


@pytest.fixture
def app() -> FastAPI:
    return create_app()


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_list_and_search_categories(app):
    async with _client(app) as client:
        everything = await client.get(BASE)
        filtered = await client.get(BASE, params={"search": "busi"})

    assert len(everything.json()) == 5
    assert everything.headers["x-data-source"] == "fallback"
    assert filtered.json() == [{"id": 2, "name": "Business", "articleCount": 3}]


@pytest.mark.asyncio
async def test_create_category_starts_empty(app):
    async with _client(app) as client:
        response = await client.post(BASE, json={"name": "Travel", "articleCount": 12})

    assert response.status_code == 201
    assert response.json() == {"id": 6, "name": "Travel", "articleCount": 0}


@pytest.mark.asyncio
async def test_get_missing_category_is_404(app):
    async with _client(app) as client:
        response = await client.get(f"{BASE}/77")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_category(app):
    async with _client(app) as client:
        response = await client.put(f"{BASE}/4", json={"name": "Research", "articleCount": 2})
        fetched = await client.get(f"{BASE}/4")

    assert response.json() == {"id": 4, "name": "Research", "articleCount": 2}
    assert fetched.json()["name"] == "Research"


@pytest.mark.asyncio
async def test_delete_refuses_category_with_articles(app):
    async with _client(app) as client:
        response = await client.delete(f"{BASE}/1")
        still_there = await client.get(f"{BASE}/1")

    assert response.status_code == 409
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_delete_empty_category_twice(app):
    async with _client(app) as client:
        created = await client.post(BASE, json={"name": "Temp"})
        category_id = created.json()["id"]
        first = await client.delete(f"{BASE}/{category_id}")
        second = await client.delete(f"{BASE}/{category_id}")

    assert first.json() == {"success": True, "id": category_id}
    assert second.status_code == 200
