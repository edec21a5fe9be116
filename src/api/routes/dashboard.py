from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import (
    ManagerSummary,
    ManagerSummaryUseCase,
    TenantSummary,
    TenantSummaryUseCase,
)
from src.depends import get_current_identity, get_unit_of_work
from src.domain.access import CallerIdentity

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/manager", status_code=status.HTTP_200_OK, response_model=ManagerSummary)
async def manager_dashboard(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: Caller is not a manager
    """
    result = await ManagerSummaryUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/tenant", status_code=status.HTTP_200_OK, response_model=TenantSummary)
async def tenant_dashboard(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await TenantSummaryUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
