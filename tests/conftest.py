from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient

from paged_resources.main import app
from paged_resources.api.v1 import dependencies
from paged_resources.services.users import UserDirectory


@pytest.fixture()
def user_directory() -> UserDirectory:
    return UserDirectory()


@pytest_asyncio.fixture()
async def async_client(user_directory: UserDirectory) -> AsyncGenerator[AsyncClient, None]:
    from httpx import ASGITransport
    app.dependency_overrides[dependencies.get_users] = lambda: user_directory
    transport = ASGITransport(app=app)
    async with AsyncClient(base_url="http://testserver", transport=transport) as client:
        yield client
    app.dependency_overrides.clear()
