"""
Fetch All Data Use Case

Loads every collection the caller may see in one go.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.apartments import ListApartmentsUseCase
from src.app.use_cases.locations import ListLocationsUseCase, LocationView
from src.app.use_cases.payments import ListPaymentsUseCase
from src.app.use_cases.service_requests import ListServiceRequestsUseCase
from src.app.use_cases.users import ListUsersUseCase
from src.domain.access import CallerIdentity
from src.domain.entities import Apartment, PaymentInfo, ServiceRequest, User
from src.domain.result import Result, Return


class DataSnapshot(BaseModel):
    """Role-scoped view of every collection"""

    apartments: List[Apartment] = []
    service_requests: List[ServiceRequest] = []
    payments: List[PaymentInfo] = []
    locations: List[LocationView] = []
    users: List[User] = []


class FetchAllDataUseCase:
    """
    Business Rules:
    - No caller means an empty snapshot
    - Each collection goes through the same access rules as its own listing
    - The first failing listing aborts the fetch
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: Optional[CallerIdentity]) -> Result[DataSnapshot]:
        if caller is None:
            return Return.ok(DataSnapshot())

        apartments = await ListApartmentsUseCase(self.uow).execute()
        if apartments.is_err():
            return apartments

        service_requests = await ListServiceRequestsUseCase(self.uow).execute(caller)
        if service_requests.is_err():
            return service_requests

        payments = await ListPaymentsUseCase(self.uow).execute(caller)
        if payments.is_err():
            return payments

        locations = await ListLocationsUseCase(self.uow).execute()
        if locations.is_err():
            return locations

        users = await ListUsersUseCase(self.uow).execute(caller)
        if users.is_err():
            return users

        return Return.ok(
            DataSnapshot(
                apartments=apartments.value,
                service_requests=service_requests.value,
                payments=payments.value,
                locations=locations.value,
                users=users.value,
            )
        )
