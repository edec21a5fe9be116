"""
Property Data Service

In-process surface over the use cases, bound to one unit of work factory,
notification sink, payment gateway and identity provider. Calls without an
explicit caller act as the identity provider's current identity.
"""

from typing import Callable, List, Optional

from src.app.services.access_control import authorize
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.notification_sink import INotificationSink, report_outcome
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.apartments import GetApartmentUseCase, ListApartmentsUseCase
from src.app.use_cases.dashboard import (
    ManagerSummary,
    ManagerSummaryUseCase,
    TenantSummary,
    TenantSummaryUseCase,
)
from src.app.use_cases.data import DataSnapshot, FetchAllDataUseCase
from src.app.use_cases.locations import ListLocationsUseCase, LocationView
from src.app.use_cases.payments import (
    CreatePaymentCommand,
    CreatePaymentUseCase,
    ListPaymentsUseCase,
)
from src.app.use_cases.service_requests import (
    CreateServiceRequestCommand,
    CreateServiceRequestUseCase,
    GetServiceRequestUseCase,
    ListServiceRequestsUseCase,
    UpdateServiceRequestStatusUseCase,
)
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from src.domain.access import CallerIdentity, Capability
from src.domain.entities import (
    Apartment,
    ApartmentStatus,
    PaymentInfo,
    ServiceRequest,
    ServiceRequestStatus,
    ServiceType,
    User,
    UserRole,
)
from src.domain.errors import PermissionDenied
from src.domain.result import Result, Return

SIGN_IN_REQUIRED = "Sign-in required"


class PropertyDataService:
    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        notifier: INotificationSink,
        gateway: IPaymentGateway,
        identity_provider: IIdentityProvider,
    ):
        self.uow_factory = uow_factory
        self.notifier = notifier
        self.gateway = gateway
        self.identity_provider = identity_provider

    def _caller(self, caller: Optional[CallerIdentity]) -> Optional[CallerIdentity]:
        return caller if caller is not None else self.identity_provider.get_current_identity()

    def _denied(self, operation: str, error: PermissionDenied) -> Result:
        # Rejected mutations are still reported exactly once
        return report_outcome(self.notifier, operation, Return.err(error), "")

    # Apartments

    async def list_apartments(
        self,
        status: Optional[ApartmentStatus] = None,
        caller: Optional[CallerIdentity] = None,
    ) -> Result[List[Apartment]]:
        if self._caller(caller) is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ListApartmentsUseCase(self.uow_factory()).execute(status)

    async def get_apartment(
        self, apartment_id: str, caller: Optional[CallerIdentity] = None
    ) -> Result[Apartment]:
        if self._caller(caller) is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await GetApartmentUseCase(self.uow_factory()).execute(apartment_id)

    # Service requests

    async def list_service_requests(
        self, caller: Optional[CallerIdentity] = None
    ) -> Result[List[ServiceRequest]]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ListServiceRequestsUseCase(self.uow_factory()).execute(caller)

    async def get_service_request(
        self, request_id: str, caller: Optional[CallerIdentity] = None
    ) -> Result[ServiceRequest]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await GetServiceRequestUseCase(self.uow_factory()).execute(caller, request_id)

    async def create_service_request(
        self,
        apartment_id: str,
        tenant_id: str,
        type: ServiceType,
        description: str,
        caller: Optional[CallerIdentity] = None,
    ) -> Result[ServiceRequest]:
        caller = self._caller(caller)
        if caller is None:
            return self._denied("create_service_request", PermissionDenied(SIGN_IN_REQUIRED))
        denied = authorize(caller, Capability.create_own_service_requests, tenant_id)
        if denied:
            return self._denied("create_service_request", denied)

        command = CreateServiceRequestCommand(
            apartment_id=apartment_id, tenant_id=tenant_id, type=type, description=description
        )
        use_case = CreateServiceRequestUseCase(self.uow_factory(), self.notifier)
        return await use_case.execute(command)

    async def update_service_request_status(
        self,
        request_id: str,
        status: ServiceRequestStatus,
        caller: Optional[CallerIdentity] = None,
    ) -> Result[ServiceRequest]:
        caller = self._caller(caller)
        if caller is None:
            return self._denied(
                "update_service_request_status", PermissionDenied(SIGN_IN_REQUIRED)
            )
        denied = authorize(caller, Capability.update_service_requests)
        if denied:
            return self._denied("update_service_request_status", denied)

        use_case = UpdateServiceRequestStatusUseCase(self.uow_factory(), self.notifier)
        return await use_case.execute(request_id, status)

    # Payments

    async def list_payments(
        self, caller: Optional[CallerIdentity] = None
    ) -> Result[List[PaymentInfo]]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ListPaymentsUseCase(self.uow_factory()).execute(caller)

    async def create_payment(
        self,
        tenant_id: str,
        apartment_id: str,
        amount: float,
        description: str,
        caller: Optional[CallerIdentity] = None,
    ) -> Result[PaymentInfo]:
        caller = self._caller(caller)
        if caller is None:
            return self._denied("create_payment", PermissionDenied(SIGN_IN_REQUIRED))
        denied = authorize(caller, Capability.create_own_payments, tenant_id)
        if denied:
            return self._denied("create_payment", denied)

        command = CreatePaymentCommand(
            tenant_id=tenant_id, apartment_id=apartment_id, amount=amount, description=description
        )
        use_case = CreatePaymentUseCase(self.uow_factory(), self.gateway, self.notifier)
        return await use_case.execute(command)

    # Users

    async def list_users(self, caller: Optional[CallerIdentity] = None) -> Result[List[User]]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ListUsersUseCase(self.uow_factory()).execute(caller)

    async def get_user(
        self, user_id: str, caller: Optional[CallerIdentity] = None
    ) -> Result[User]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        if user_id != caller.id:
            denied = authorize(caller, Capability.view_users)
            if denied:
                return Return.err(denied)
        return await GetUserUseCase(self.uow_factory()).execute(user_id)

    async def create_user(
        self,
        email: str,
        name: str,
        role: UserRole = UserRole.tenant,
        apartment_id: Optional[str] = None,
        caller: Optional[CallerIdentity] = None,
    ) -> Result[User]:
        caller = self._caller(caller)
        if caller is None:
            return self._denied("create_user", PermissionDenied(SIGN_IN_REQUIRED))
        denied = authorize(caller, Capability.create_users)
        if denied:
            return self._denied("create_user", denied)

        command = CreateUserCommand(email=email, name=name, role=role, apartment_id=apartment_id)
        return await CreateUserUseCase(self.uow_factory(), self.notifier).execute(command)

    # Locations

    async def list_locations(
        self, caller: Optional[CallerIdentity] = None
    ) -> Result[List[LocationView]]:
        if self._caller(caller) is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ListLocationsUseCase(self.uow_factory()).execute()

    # Aggregates

    async def fetch_all(self, caller: Optional[CallerIdentity] = None) -> Result[DataSnapshot]:
        return await FetchAllDataUseCase(self.uow_factory()).execute(self._caller(caller))

    async def manager_summary(
        self, caller: Optional[CallerIdentity] = None
    ) -> Result[ManagerSummary]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await ManagerSummaryUseCase(self.uow_factory()).execute(caller)

    async def tenant_summary(
        self, caller: Optional[CallerIdentity] = None
    ) -> Result[TenantSummary]:
        caller = self._caller(caller)
        if caller is None:
            return Return.err(PermissionDenied(SIGN_IN_REQUIRED))
        return await TenantSummaryUseCase(self.uow_factory()).execute(caller)
