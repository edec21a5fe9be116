"""
Caller identity and role capabilities.

A caller is whoever the identity provider vouches for. What a caller may
see or do is decided by the capability set of its role, never by comparing
role strings at the call site.
"""

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel

from src.domain.entities import User, UserRole


class Capability(str, Enum):
    """Single permission granted to a role"""

    view_all_service_requests = "view_all_service_requests"
    view_all_payments = "view_all_payments"
    view_users = "view_users"
    create_users = "create_users"
    update_service_requests = "update_service_requests"
    create_own_service_requests = "create_own_service_requests"
    create_own_payments = "create_own_payments"


ROLE_CAPABILITIES: dict = {
    UserRole.manager: frozenset(
        {
            Capability.view_all_service_requests,
            Capability.view_all_payments,
            Capability.view_users,
            Capability.create_users,
            Capability.update_service_requests,
        }
    ),
    UserRole.tenant: frozenset(
        {
            Capability.create_own_service_requests,
            Capability.create_own_payments,
        }
    ),
}


class CallerIdentity(BaseModel):
    """Authenticated actor performing an operation"""

    id: str
    role: UserRole
    name: str
    email: str
    apartment_id: Optional[str] = None

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return ROLE_CAPABILITIES.get(self.role, frozenset())

    def can(self, capability: Capability) -> bool:
        return capability in self.capabilities

    @classmethod
    def from_user(cls, user: User) -> "CallerIdentity":
        return cls(
            id=user.id,
            role=user.role,
            name=user.name,
            email=user.email,
            apartment_id=user.apartment_id,
        )


# Rights that only cover records owned by the caller
OWN_RECORD_CAPABILITIES = frozenset(
    {Capability.create_own_service_requests, Capability.create_own_payments}
)
