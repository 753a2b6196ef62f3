from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from sentence_grammar.main import app

ANALYZE_URL = '/api/v1/grammar/analyze/'


@pytest.fixture
def client():
    """Test client fixture."""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url='http://test'
    ) as ac:
        yield ac


@pytest.fixture
def analyze_url() -> str:
    return ANALYZE_URL
