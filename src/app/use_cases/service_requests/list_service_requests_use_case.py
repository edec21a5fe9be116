"""
List Service Requests Use Case

Returns the service requests visible to the caller.
"""

from typing import List

from src.app.services.access_control import service_request_scope
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.entities import ServiceRequest
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return


class ListServiceRequestsUseCase:
    """
    Business Rules:
    - Managers see every request
    - Tenants see only requests whose tenant_id is their own id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[List[ServiceRequest]]:
        scope = service_request_scope(caller)
        try:
            async with self.uow:
                if scope is None:
                    requests = await self.uow.service_requests.list_all()
                else:
                    requests = await self.uow.service_requests.list_by_tenant_id(scope)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok(requests)
