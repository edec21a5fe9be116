from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import Apartment
from src.domain.errors import BackendUnavailable, NotFoundError
from src.domain.result import Result, Return


class GetApartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, apartment_id: str) -> Result[Apartment]:
        try:
            async with self.uow:
                apartment = await self.uow.apartments.get_by_id(apartment_id)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        if apartment is None:
            return Return.err(NotFoundError(f"Apartment {apartment_id} not found"))
        return Return.ok(apartment)
