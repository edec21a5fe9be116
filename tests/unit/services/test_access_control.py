import pytest

from src.app.services.access_control import (
    authorize,
    can_view_users,
    payment_scope,
    service_request_scope,
)
from src.domain.access import Capability


def test_manager_scope_is_unrestricted(manager):
    assert service_request_scope(manager) is None
    assert payment_scope(manager) is None
    assert can_view_users(manager)


def test_tenant_scope_is_own_id(tenant):
    assert service_request_scope(tenant) == "2"
    assert payment_scope(tenant) == "2"
    assert not can_view_users(tenant)


@pytest.mark.parametrize(
    "capability",
    [
        Capability.create_users,
        Capability.update_service_requests,
        Capability.view_users,
    ],
)
def test_tenant_denied_manager_rights(tenant, capability):
    denied = authorize(tenant, capability)

    assert denied is not None
    assert denied.code == "FORBIDDEN"


def test_tenant_acts_on_own_records(tenant):
    assert authorize(tenant, Capability.create_own_payments, "2") is None
    assert authorize(tenant, Capability.create_own_service_requests, "2") is None


def test_tenant_cannot_act_for_someone_else(tenant):
    denied = authorize(tenant, Capability.create_own_payments, "3")

    assert denied is not None
    assert denied.message == "Tenants can only act on their own records"


def test_manager_cannot_pay_rent(manager):
    assert authorize(manager, Capability.create_own_payments, "1") is not None


def test_manager_manages(manager):
    assert authorize(manager, Capability.create_users) is None
    assert authorize(manager, Capability.update_service_requests) is None
