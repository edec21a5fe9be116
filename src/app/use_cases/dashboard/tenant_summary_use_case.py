"""
Tenant Summary Use Case

What a tenant sees first: their apartment, open requests and latest payments.
"""

from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.entities import ServiceRequestStatus
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return

from .dtos import TenantSummary

RECENT_PAYMENTS_LIMIT = 3


class TenantSummaryUseCase:
    """
    Business Rules:
    - Only the caller's own records are read
    - Recent payments are the newest three by date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[TenantSummary]:
        try:
            async with self.uow:
                apartment = None
                if caller.apartment_id:
                    apartment = await self.uow.apartments.get_by_id(caller.apartment_id)
                if apartment is None:
                    apartment = await self.uow.apartments.get_by_tenant_id(caller.id)
                requests = await self.uow.service_requests.list_by_tenant_id(caller.id)
                payments = await self.uow.payments.list_by_tenant_id(caller.id)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        pending = [
            request
            for request in requests
            if ServiceRequestStatus(request.status) == ServiceRequestStatus.pending
        ]
        recent = sorted(payments, key=lambda payment: payment.date, reverse=True)

        return Return.ok(
            TenantSummary(
                apartment=apartment,
                pending_service_requests=pending,
                recent_payments=recent[:RECENT_PAYMENTS_LIMIT],
            )
        )
