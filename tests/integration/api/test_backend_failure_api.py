import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from src.depends import get_notifier, get_unit_of_work
from src.domain.access import CallerIdentity
from src.domain.entities import UserRole


@pytest_asyncio.fixture
async def broken_client(tmp_path, notifier):
    # Database file without tables: every query fails
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'broken.db'}")
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await engine.dispose()


@pytest.fixture
def tenant_token_headers():
    identity = CallerIdentity(
        id="2",
        role=UserRole.tenant,
        name="John Doe",
        email="tenant1@example.com",
        apartment_id="1",
    )
    return {"Authorization": f"Bearer {generate_jwt(identity)}"}


@pytest.mark.asyncio
async def test_listing_returns_503(broken_client: AsyncClient, tenant_token_headers):
    response = await broken_client.get("/service-requests", headers=tenant_token_headers)

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "BACKEND_UNAVAILABLE"


@pytest.mark.asyncio
async def test_mutation_returns_503_and_notifies_once(
    broken_client: AsyncClient, tenant_token_headers, notifier
):
    response = await broken_client.post(
        "/service-requests",
        json={"type": "cleaning", "description": "Windows"},
        headers=tenant_token_headers,
    )

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "BACKEND_UNAVAILABLE"
    notifier.notify.assert_called_once()
