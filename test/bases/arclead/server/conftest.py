from httpx import ASGITransport, AsyncClient
import pytest_asyncio

from arclead.fs import with_bucket
from arclead.server.core import app


@pytest_asyncio.fixture
async def httpx_client(bucket):
    app.dependency_overrides[with_bucket] = lambda: bucket
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
