from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.apartments import GetApartmentUseCase, ListApartmentsUseCase
from src.depends import get_current_identity, get_unit_of_work
from src.domain.access import CallerIdentity
from src.domain.entities import Apartment, ApartmentStatus

router = APIRouter(prefix="/apartments", tags=["Apartments"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[Apartment])
async def list_apartments(
    status: Optional[ApartmentStatus] = None,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Every apartment, optionally only the empty or booked ones"""
    result = await ListApartmentsUseCase(uow).execute(status)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{apartment_id}", status_code=status.HTTP_200_OK, response_model=Apartment)
async def get_apartment(
    apartment_id: str,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Unknown apartment
    """
    result = await GetApartmentUseCase(uow).execute(apartment_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
