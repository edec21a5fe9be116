from datetime import UTC, datetime

import pytest

from src.app.use_cases.payments import ListPaymentsUseCase
from src.app.use_cases.service_requests import (
    GetServiceRequestUseCase,
    ListServiceRequestsUseCase,
)
from src.app.use_cases.users import GetUserUseCase, ListUsersUseCase
from src.domain.entities import ServiceRequest, ServiceRequestStatus, ServiceType


def other_tenants_request():
    return ServiceRequest(
        id="2",
        apartment_id="2",
        tenant_id="3",
        type=ServiceType.maintenance,
        description="The sink is leaking",
        status=ServiceRequestStatus.in_progress,
        created_at=datetime(2023, 4, 10, 8, 15, tzinfo=UTC),
    )


@pytest.mark.asyncio
async def test_manager_lists_every_service_request(mock_uow, manager):
    mock_uow.service_requests.list_all.return_value = [other_tenants_request()]

    result = await ListServiceRequestsUseCase(mock_uow).execute(manager)

    assert result.is_ok()
    assert len(result.value) == 1
    mock_uow.service_requests.list_by_tenant_id.assert_not_called()


@pytest.mark.asyncio
async def test_tenant_lists_only_own_service_requests(mock_uow, tenant):
    mock_uow.service_requests.list_by_tenant_id.return_value = []

    result = await ListServiceRequestsUseCase(mock_uow).execute(tenant)

    assert result.is_ok()
    assert result.value == []
    mock_uow.service_requests.list_by_tenant_id.assert_called_once_with("2")
    mock_uow.service_requests.list_all.assert_not_called()


@pytest.mark.asyncio
async def test_tenant_lists_only_own_payments(mock_uow, tenant):
    mock_uow.payments.list_by_tenant_id.return_value = []

    result = await ListPaymentsUseCase(mock_uow).execute(tenant)

    assert result.is_ok()
    mock_uow.payments.list_by_tenant_id.assert_called_once_with("2")
    mock_uow.payments.list_all.assert_not_called()


@pytest.mark.asyncio
async def test_manager_lists_every_payment(mock_uow, manager):
    mock_uow.payments.list_all.return_value = []

    result = await ListPaymentsUseCase(mock_uow).execute(manager)

    assert result.is_ok()
    mock_uow.payments.list_all.assert_called_once()


@pytest.mark.asyncio
async def test_tenant_gets_no_users(mock_uow, tenant):
    result = await ListUsersUseCase(mock_uow).execute(tenant)

    assert result.is_ok()
    assert result.value == []
    mock_uow.users.list_all.assert_not_called()


@pytest.mark.asyncio
async def test_someone_elses_request_reads_as_missing(mock_uow, tenant):
    mock_uow.service_requests.get_by_id.return_value = other_tenants_request()

    result = await GetServiceRequestUseCase(mock_uow).execute(tenant, "2")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_manager_reads_any_request(mock_uow, manager):
    mock_uow.service_requests.get_by_id.return_value = other_tenants_request()

    result = await GetServiceRequestUseCase(mock_uow).execute(manager, "2")

    assert result.is_ok()
    assert result.value.tenant_id == "3"


@pytest.mark.asyncio
async def test_get_unknown_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await GetUserUseCase(mock_uow).execute("999")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
