"""End-to-end tests for the article endpoints, served from the in-memory store."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from article_cms.main import create_app

BASE = "/api/v1/articles"


@pytest.fixture
def app() -> FastAPI:
    """A fresh application, hence fresh seed data, per test."""
    return create_app()


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_list_articles_is_tagged_as_fallback(app):
    async with _client(app) as client:
        response = await client.get(BASE)

    assert response.status_code == 200
    assert response.headers["x-data-source"] == "fallback"
    assert response.headers["x-fallback-reason"] == "unreachable"
    data = response.json()
    assert len(data) == 12
    assert data[0]["readTime"] == "8 min read"
    assert data[0]["relatedArticles"] == [6, 4]


@pytest.mark.asyncio
async def test_create_then_get(app):
    async with _client(app) as client:
        created = await client.post(BASE, json={"title": "X"})
        fetched = await client.get(f"{BASE}/13")

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 13
    assert body["status"] == "Published"
    assert body["category"] == "Uncategorized"
    assert body["excerpt"] == "X..."
    assert fetched.status_code == 200
    assert fetched.json() == body


@pytest.mark.asyncio
async def test_create_requires_title(app):
    async with _client(app) as client:
        response = await client.post(BASE, json={"category": "Science"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_rejects_unknown_status(app):
    async with _client(app) as client:
        response = await client.post(BASE, json={"title": "X", "status": "Archived"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_missing_article_is_404(app):
    async with _client(app) as client:
        response = await client.get(f"{BASE}/999")
    assert response.status_code == 404
    assert "999" in response.json()["detail"]


@pytest.mark.asyncio
async def test_update_missing_article_echoes_but_does_not_store(app):
    async with _client(app) as client:
        updated = await client.put(f"{BASE}/999", json={"title": "Ghost"})
        fetched = await client.get(f"{BASE}/999")

    assert updated.status_code == 200
    assert updated.json()["id"] == 999
    assert fetched.status_code == 404


@pytest.mark.asyncio
async def test_update_replaces_article(app):
    payload = {"title": "Edited", "category": "Science", "status": "Draft", "relatedArticles": [2]}
    async with _client(app) as client:
        response = await client.put(f"{BASE}/1", json=payload)
        fetched = await client.get(f"{BASE}/1")

    assert response.status_code == 200
    article = fetched.json()
    assert article["title"] == "Edited"
    assert article["status"] == "Draft"
    assert article["author"] is None
    assert article["relatedArticles"] == [2]


@pytest.mark.asyncio
async def test_delete_is_idempotent(app):
    async with _client(app) as client:
        first = await client.delete(f"{BASE}/5")
        second = await client.delete(f"{BASE}/5")
        listing = await client.get(BASE)

    assert first.json() == {"success": True, "id": 5}
    assert second.status_code == 200
    assert second.json()["success"] is True
    assert len(listing.json()) == 11


@pytest.mark.asyncio
async def test_search_for_reader(app):
    async with _client(app) as client:
        response = await client.get(f"{BASE}/search", params={"search": "quantum"})

    assert response.status_code == 200
    body = response.json()
    assert [a["id"] for a in body["items"]] == [4]
    assert body["total"] == 1
    assert body["totalPages"] == 1


@pytest.mark.asyncio
async def test_search_for_admin_with_status_and_paging(app):
    async with _client(app) as client:
        response = await client.get(
            f"{BASE}/search",
            params={"role": "admin", "status": "Published", "page": 2},
        )

    body = response.json()
    assert body["total"] == 8
    assert body["perPage"] == 5
    assert body["page"] == 2
    assert [a["id"] for a in body["items"]] == [8, 10, 12]
    assert body["pageNumbers"] == [1, 2]


@pytest.mark.asyncio
async def test_related_articles(app):
    async with _client(app) as client:
        response = await client.get(f"{BASE}/1/related")
    assert [a["id"] for a in response.json()] == [4, 6]


@pytest.mark.asyncio
async def test_publish_and_draft(app):
    async with _client(app) as client:
        published = await client.post(f"{BASE}/3/publish")
        drafted = await client.post(f"{BASE}/1/draft")
        missing = await client.post(f"{BASE}/404/publish")

    assert published.json()["status"] == "Published"
    assert drafted.json()["status"] == "Draft"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_compose_draft_from_editor_input(app):
    async with _client(app) as client:
        response = await client.post(
            f"{BASE}/compose",
            params={"draft": "true"},
            json={"title": "Hi", "content": "Line one\nLine two"},
        )

    assert response.status_code == 201
    article = response.json()
    assert article["id"] == 13
    assert article["status"] == "Draft"
    assert article["author"] == "Admin User"
    assert article["content"] == "<p>Line one<br />Line two</p>"
    assert article["readTime"] == "1 min read"


@pytest.mark.asyncio
async def test_apps_do_not_share_state():
    first, second = create_app(), create_app()
    async with _client(first) as client:
        await client.delete(f"{BASE}/1")
    async with _client(second) as client:
        response = await client.get(f"{BASE}/1")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_preview_renders_editor_text(app):
    async with _client(app) as client:
        response = await client.post(f"{BASE}/preview", json={"content": "## Plan\n**now**"})
        empty = await client.post(f"{BASE}/preview", json={})

    assert response.status_code == 200
    assert response.json() == {"html": "<p><h2>Plan</h2><br /><strong>now</strong></p>"}
    assert empty.json() == {"html": "<p>Nothing to preview yet.</p>"}


@pytest.mark.asyncio
async def test_editor_form_of_existing_article(app):
    async with _client(app) as client:
        response = await client.get(f"{BASE}/5/compose")
        missing = await client.get(f"{BASE}/99/compose")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Streaming Wars: The New Era"
    assert body["category"] == "Entertainment"
    assert "<" not in body["content"]
    assert response.headers["x-data-source"] == "fallback"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_edit_article_from_editor_input(app):
    form = {"title": "Streaming, revisited", "category": "Business", "content": "A\n\nB", "excerpt": "E"}
    async with _client(app) as client:
        edited = await client.put(f"{BASE}/5/compose", json=form)
        fetched = await client.get(f"{BASE}/5")
        drafted = await client.put(f"{BASE}/5/compose", params={"draft": "true"}, json={"title": "Again"})
        missing = await client.put(f"{BASE}/99/compose", json=form)

    assert edited.status_code == 200
    assert fetched.json()["content"] == "<p>A</p><p>B</p>"
    assert fetched.json()["category"] == "Business"
    assert fetched.json()["status"] == "Published"
    assert drafted.json()["status"] == "Draft"
    assert drafted.json()["content"] == "<p>A</p><p>B</p>"
    assert drafted.json()["excerpt"] == "E"
    assert missing.status_code == 404
