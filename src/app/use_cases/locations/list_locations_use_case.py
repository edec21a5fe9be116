from typing import List

from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return

from .dtos import LocationView


class ListLocationsUseCase:
    """Read-only reference data, visible to every authenticated caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[LocationView]]:
        try:
            async with self.uow:
                locations = await self.uow.locations.list_all()
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok([LocationView.from_entity(location) for location in locations])
