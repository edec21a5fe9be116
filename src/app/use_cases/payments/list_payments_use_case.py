"""
List Payments Use Case

Returns the payments visible to the caller.
"""

from typing import List

from src.app.services.access_control import payment_scope
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.entities import PaymentInfo
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return


class ListPaymentsUseCase:
    """
    Business Rules:
    - Managers see every payment, completed or failed
    - Tenants see only their own payments
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[List[PaymentInfo]]:
        scope = payment_scope(caller)
        try:
            async with self.uow:
                if scope is None:
                    payments = await self.uow.payments.list_all()
                else:
                    payments = await self.uow.payments.list_by_tenant_id(scope)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok(payments)
