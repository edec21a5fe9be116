import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.access import CallerIdentity
from src.domain.entities import UserRole


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name in ("users", "apartments", "service_requests", "payments", "locations"):
        repository = MagicMock()
        for method in (
            "get_by_id",
            "get_by_email",
            "get_by_tenant_id",
            "list_all",
            "list_by_status",
            "list_by_tenant_id",
            "create",
            "update",
        ):
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    # Writes hand back what they were given
    uow.users.create.side_effect = lambda entity: entity
    uow.apartments.update.side_effect = lambda entity: entity
    uow.service_requests.create.side_effect = lambda entity: entity
    uow.service_requests.update.side_effect = lambda entity: entity
    uow.payments.create.side_effect = lambda entity: entity

    return uow


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def manager():
    return CallerIdentity(
        id="1", role=UserRole.manager, name="Admin Manager", email="manager@example.com"
    )


@pytest.fixture
def tenant():
    return CallerIdentity(
        id="2",
        role=UserRole.tenant,
        name="John Doe",
        email="tenant1@example.com",
        apartment_id="1",
    )
