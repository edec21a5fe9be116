from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.location_repository import ILocationRepository
from src.domain.entities import Location


class LocationRepository(ILocationRepository):
    """Location repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, location_id: str) -> Optional[Location]:
        """Get location by ID"""
        stmt = select(Location).where(Location.id == location_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Location]:
        """Get every location"""
        result = await self.session.exec(select(Location))
        return list(result.all())

    async def create(self, location: Location) -> Location:
        """Create a new location"""
        self.session.add(location)
        await self.session.flush()
        await self.session.refresh(location)
        return location
