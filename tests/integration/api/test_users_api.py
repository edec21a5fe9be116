import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_manager_lists_users(client: AsyncClient, manager_headers):
    response = await client.get("/users", headers=manager_headers)

    assert response.status_code == 200
    assert len(response.json()) == 3


@pytest.mark.asyncio
async def test_tenant_lists_no_users(client: AsyncClient, tenant_headers):
    response = await client.get("/users", headers=tenant_headers)

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_tenant_reads_self_only(client: AsyncClient, tenant_headers):
    own = await client.get("/users/2", headers=tenant_headers)
    other = await client.get("/users/3", headers=tenant_headers)

    assert own.status_code == 200
    assert own.json()["email"] == "tenant1@example.com"
    assert other.status_code == 403


@pytest.mark.asyncio
async def test_manager_registers_tenant(client: AsyncClient, manager_headers):
    response = await client.post(
        "/users",
        json={"email": "New@Example.com", "name": "New Tenant", "apartment_id": "3"},
        headers=manager_headers,
    )

    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "new@example.com"
    assert user["role"] == "tenant"

    apartment = await client.get("/apartments/3", headers=manager_headers)
    assert apartment.json()["status"] == "booked"
    assert apartment.json()["tenant_id"] == user["id"]


@pytest.mark.asyncio
async def test_duplicate_email(client: AsyncClient, manager_headers):
    response = await client.post(
        "/users",
        json={"email": "tenant2@example.com", "name": "Jane Again"},
        headers=manager_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_tenant_cannot_register_users(client: AsyncClient, tenant_headers):
    response = await client.post(
        "/users", json={"email": "friend@example.com", "name": "Friend"}, headers=tenant_headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_refused_registration_is_notified(client: AsyncClient, tenant_headers, notifier):
    response = await client.post(
        "/users", json={"email": "friend@example.com", "name": "Friend"}, headers=tenant_headers
    )

    assert response.status_code == 403
    notifier.notify.assert_called_once()
    notification = notifier.notify.call_args.args[0]
    assert notification.operation == "create_user"
    assert notification.level == "error"
