"""
Manager Summary Use Case

Occupancy and workload figures for the manager dashboard.
"""

from src.app.services.access_control import authorize
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity, Capability
from src.domain.entities import ApartmentStatus, ServiceRequestStatus, UserRole
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return

from .dtos import ManagerSummary, ServiceRequestCounts


class ManagerSummaryUseCase:
    """
    Business Rules:
    - Caller must be allowed to view users (managers only)
    - occupancy_rate is booked/total as a percentage, 0 for an empty building
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[ManagerSummary]:
        denied = authorize(caller, Capability.view_users)
        if denied:
            return Return.err(denied)

        try:
            async with self.uow:
                apartments = await self.uow.apartments.list_all()
                requests = await self.uow.service_requests.list_all()
                users = await self.uow.users.list_all()
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        booked = sum(1 for apt in apartments if apt.status == ApartmentStatus.booked)
        occupancy_rate = (booked / len(apartments) * 100) if apartments else 0.0

        counts = ServiceRequestCounts(total=len(requests))
        for request in requests:
            status = ServiceRequestStatus(request.status)
            if status == ServiceRequestStatus.pending:
                counts.pending += 1
            elif status == ServiceRequestStatus.in_progress:
                counts.in_progress += 1
            else:
                counts.completed += 1

        return Return.ok(
            ManagerSummary(
                total_apartments=len(apartments),
                booked_apartments=booked,
                occupancy_rate=round(occupancy_rate, 2),
                total_tenants=sum(1 for user in users if user.role == UserRole.tenant),
                service_requests=counts,
            )
        )
