"""API test fixtures — FastAPI app behind an httpx async client.

Invariants:
    - No lifespan: schemas are built lazily on first use, exactly as with
      eager_schema_init disabled

Design Decisions:
    - ASGITransport over a live server: in-process, no ports
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fieldguard.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
