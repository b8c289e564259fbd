import asyncio

import httpx
import pytest

from coursehub.navbar.fetcher import CategoryFetcher

API_BASE = "http://api.test/api/v1"
CATEGORIES_URL = f"{API_BASE}/course/showAllCategories"


def categories_handler(names, calls=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(str(request.url))
        return httpx.Response(
            200, json={"success": True, "data": [{"name": name} for name in names]}
        )

    return handler


@pytest.fixture
def make_fetcher():
    """Фабрика CategoryFetcher поверх httpx.MockTransport; клиенты закрываются после теста."""
    clients = []

    def factory(handler, base_url: str = API_BASE) -> CategoryFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return CategoryFetcher(base_url=base_url, client=client)

    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def renders():
    return []
