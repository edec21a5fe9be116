import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_login_returns_token_and_identity(client: AsyncClient):
    response = await client.post("/auth/login", json={"email": "Tenant1@Example.com"})

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert isinstance(data["access_token"], str)
    assert data["user"]["id"] == "2"
    assert data["user"]["role"] == "tenant"
    assert data["user"]["apartment_id"] == "1"


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient):
    response = await client.post("/auth/login", json={"email": "nobody@example.com"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_me(client: AsyncClient, tenant_headers):
    response = await client.get("/me", headers=tenant_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["name"] == "John Doe"
    assert data["apartment"]["number"] == "101"


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient):
    response = await client.get("/me")

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_me_rejects_garbage_token(client: AsyncClient):
    response = await client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
