import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.main import app
from todo_api.storage import get_repo, new_repository

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
def repo():
    # fresh seeded store per test
    return new_repository(seed=True)

@pytest.fixture
def initialized_app(repo):
    app.dependency_overrides[get_repo] = lambda: repo
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
async def client(initialized_app):
    transport = ASGITransport(app=initialized_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
