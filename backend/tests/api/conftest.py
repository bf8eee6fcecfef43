"""API test fixtures: a fresh app + BlogService per test, served over httpx.

Invariants:
    - Every test gets an isolated store and allocator (ids restart at 0)
    - No lifespan: logging setup is not needed for route assertions
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.config import Settings
from blog_api.main import create_app
from blog_api.services.blog_service import BlogService


@pytest.fixture
def blog_service():
    return BlogService()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def test_app(blog_service, settings):
    return create_app(service=blog_service, settings=settings)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_post(client):
    """POST /posts and return the decoded body."""
    async def _create(title: str, content: str) -> dict:
        res = await client.post("/posts", json={"title": title, "content": content})
        assert res.status_code == 200
        return res.json()
    return _create
