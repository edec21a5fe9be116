from typing import List, Optional

from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import Apartment, ApartmentStatus
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return


class ListApartmentsUseCase:
    """Apartments are visible to every authenticated caller, optionally filtered by status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, status: Optional[ApartmentStatus] = None) -> Result[List[Apartment]]:
        try:
            async with self.uow:
                if status is None:
                    apartments = await self.uow.apartments.list_all()
                else:
                    apartments = await self.uow.apartments.list_by_status(status)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok(apartments)
