"""
Access-Control Filter

Derives what a caller may see. Tenant scoping is resolved before the store
is queried, so records a caller may not see never leave the repository.
"""

from typing import Optional

from src.domain.access import OWN_RECORD_CAPABILITIES, CallerIdentity, Capability
from src.domain.errors import PermissionDenied


def tenant_scope(caller: CallerIdentity, view_all: Capability) -> Optional[str]:
    """
    Tenant id a listing of tenant-owned records must be restricted to.

    Returns:
        None when the caller holds view_all, otherwise the caller's own id
    """
    if caller.can(view_all):
        return None
    return caller.id


def service_request_scope(caller: CallerIdentity) -> Optional[str]:
    return tenant_scope(caller, Capability.view_all_service_requests)


def payment_scope(caller: CallerIdentity) -> Optional[str]:
    return tenant_scope(caller, Capability.view_all_payments)


def can_view_users(caller: CallerIdentity) -> bool:
    # Tenants never enumerate other users
    return caller.can(Capability.view_users)


def authorize(
    caller: CallerIdentity, capability: Capability, tenant_id: Optional[str] = None
) -> Optional[PermissionDenied]:
    """
    Check a mutation right.

    Args:
        caller: Identity performing the mutation
        capability: Right the mutation needs
        tenant_id: Owner of the record being created, for "own" rights

    Returns:
        None when allowed, otherwise the PermissionDenied error to report
    """
    if not caller.can(capability):
        return PermissionDenied(
            f"Role {caller.role.value} is not allowed to {capability.value.replace('_', ' ')}"
        )
    if tenant_id is not None and capability in OWN_RECORD_CAPABILITIES and tenant_id != caller.id:
        return PermissionDenied("Tenants can only act on their own records")
    return None
