import pytest

from src.app.use_cases.auth import LoadContextUseCase, SignInUseCase
from src.adapter.seed import demo_apartments, demo_users
from src.domain.entities import UserRole


@pytest.mark.asyncio
async def test_sign_in_known_email(mock_uow):
    mock_uow.users.get_by_email.return_value = demo_users()[1]

    result = await SignInUseCase(mock_uow).execute(" Tenant1@Example.com ")

    assert result.is_ok()
    identity = result.value
    assert identity.id == "2"
    assert identity.role == UserRole.tenant
    assert identity.apartment_id == "1"
    mock_uow.users.get_by_email.assert_called_once_with("tenant1@example.com")


@pytest.mark.asyncio
async def test_sign_in_unknown_email(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    result = await SignInUseCase(mock_uow).execute("nobody@example.com")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_load_context_with_apartment(mock_uow):
    mock_uow.users.get_by_id.return_value = demo_users()[1]
    mock_uow.apartments.get_by_tenant_id.return_value = demo_apartments()[0]

    result = await LoadContextUseCase(mock_uow).execute("2")

    assert result.is_ok()
    assert result.value.user.email == "tenant1@example.com"
    assert result.value.apartment.id == "1"


@pytest.mark.asyncio
async def test_load_context_for_removed_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await LoadContextUseCase(mock_uow).execute("404")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
