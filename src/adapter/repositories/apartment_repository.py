from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.apartment_repository import IApartmentRepository
from src.domain.entities import Apartment, ApartmentStatus


class ApartmentRepository(IApartmentRepository):
    """Apartment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, apartment_id: str) -> Optional[Apartment]:
        """Get apartment by ID"""
        stmt = select(Apartment).where(Apartment.id == apartment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_tenant_id(self, tenant_id: str) -> Optional[Apartment]:
        """Get the apartment a tenant occupies"""
        stmt = select(Apartment).where(Apartment.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[Apartment]:
        """Get every apartment"""
        result = await self.session.exec(select(Apartment))
        return list(result.all())

    async def list_by_status(self, status: ApartmentStatus) -> List[Apartment]:
        """Get apartments with the given occupancy status"""
        stmt = select(Apartment).where(Apartment.status == status)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, apartment: Apartment) -> Apartment:
        """Create a new apartment"""
        self.session.add(apartment)
        await self.session.flush()
        await self.session.refresh(apartment)
        return apartment

    async def update(self, apartment: Apartment) -> Apartment:
        """Update existing apartment"""
        self.session.add(apartment)
        await self.session.flush()
        await self.session.refresh(apartment)
        return apartment
