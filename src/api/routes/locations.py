from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.locations import ListLocationsUseCase, LocationView
from src.depends import get_current_identity, get_unit_of_work
from src.domain.access import CallerIdentity

router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[LocationView])
async def list_locations(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Neighbourhood points of interest with {x, y} map coordinates"""
    result = await ListLocationsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)

    return result.value
