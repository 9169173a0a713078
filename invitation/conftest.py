import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from invitation.config.database import engine
from invitation.guests.repository import orm_models as guest_orm_models  # noqa: F401
from invitation.main import app
from invitation.models.base import BaseModel
from invitation.wedding.repository import orm_models as wedding_orm_models  # noqa: F401


@pytest_asyncio.fixture(autouse=True)
async def test_db():
    """Recreate the schema on the test database for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    # connections are bound to the loop of the test that opened them
    await engine.dispose()


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client backed by the real models and the test database."""
    async with client_factory() as ac:
        yield ac
