import pytest

from src.app.services.notification_sink import NotificationLevel
from src.app.services.unit_of_work import StoreUnavailable
from src.app.use_cases.service_requests import (
    CreateServiceRequestCommand,
    CreateServiceRequestUseCase,
)
from src.domain.entities import (
    Apartment,
    ApartmentStatus,
    ServiceRequestStatus,
    ServiceType,
    User,
    UserRole,
)


@pytest.fixture
def apartment():
    return Apartment(
        id="1",
        number="101",
        floor=1,
        bedrooms=2,
        bathrooms=1,
        rent=1200,
        status=ApartmentStatus.booked,
        tenant_id="2",
    )


@pytest.fixture
def tenant_user():
    return User(
        id="2", email="tenant1@example.com", name="John Doe", role=UserRole.tenant, apartment_id="1"
    )


def make_command(**overrides):
    values = dict(
        apartment_id="1",
        tenant_id="2",
        type=ServiceType.plumbing,
        description="Kitchen tap drips",
    )
    values.update(overrides)
    return CreateServiceRequestCommand(**values)


@pytest.mark.asyncio
async def test_create_service_request_starts_pending(mock_uow, notifier, apartment, tenant_user):
    mock_uow.apartments.get_by_id.return_value = apartment
    mock_uow.users.get_by_id.return_value = tenant_user

    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(make_command())

    assert result.is_ok()
    request = result.value
    assert request.status == ServiceRequestStatus.pending
    assert request.created_at is not None
    assert request.updated_at is None
    assert request.id
    assert request.description == "Kitchen tap drips"
    mock_uow.service_requests.create.assert_called_once()
    mock_uow.commit.assert_called_once()

    notifier.notify.assert_called_once()
    notification = notifier.notify.call_args.args[0]
    assert notification.level == NotificationLevel.success
    assert notification.message == "Service request submitted successfully"


@pytest.mark.asyncio
async def test_create_service_request_blank_description(mock_uow, notifier):
    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(
        make_command(description="   ")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.service_requests.create.assert_not_called()
    mock_uow.commit.assert_not_called()

    notifier.notify.assert_called_once()
    notification = notifier.notify.call_args.args[0]
    assert notification.level == NotificationLevel.error
    assert notification.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_service_request_unknown_apartment(mock_uow, notifier, tenant_user):
    mock_uow.apartments.get_by_id.return_value = None
    mock_uow.users.get_by_id.return_value = tenant_user

    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(
        make_command(apartment_id="999")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert "999" in result.error.message
    mock_uow.service_requests.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_service_request_unknown_tenant(mock_uow, notifier, apartment):
    mock_uow.apartments.get_by_id.return_value = apartment
    mock_uow.users.get_by_id.return_value = None

    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(
        make_command(tenant_id="42")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_service_request_store_down(mock_uow, notifier):
    mock_uow.apartments.get_by_id.side_effect = StoreUnavailable("connection refused")

    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(make_command())

    assert result.is_err()
    assert result.error.code == "BACKEND_UNAVAILABLE"
    notifier.notify.assert_called_once()


@pytest.mark.asyncio
async def test_create_service_request_for_someone_elses_apartment(
    mock_uow, notifier, apartment
):
    mock_uow.apartments.get_by_id.return_value = apartment
    mock_uow.users.get_by_id.return_value = User(
        id="3", email="tenant2@example.com", name="Jane Smith", role=UserRole.tenant
    )

    result = await CreateServiceRequestUseCase(mock_uow, notifier).execute(
        make_command(tenant_id="3")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.service_requests.create.assert_not_called()
    notifier.notify.assert_called_once()
