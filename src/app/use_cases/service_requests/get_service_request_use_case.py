from src.app.services.access_control import service_request_scope
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.entities import ServiceRequest
from src.domain.errors import BackendUnavailable, NotFoundError
from src.domain.result import Result, Return


class GetServiceRequestUseCase:
    """Fetch one service request; records outside the caller's scope read as missing"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity, request_id: str) -> Result[ServiceRequest]:
        try:
            async with self.uow:
                request = await self.uow.service_requests.get_by_id(request_id)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        scope = service_request_scope(caller)
        if request is None or (scope is not None and request.tenant_id != scope):
            return Return.err(NotFoundError(f"Service request {request_id} not found"))

        return Return.ok(request)
