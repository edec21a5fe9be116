from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Apartment, ApartmentStatus


class IApartmentRepository(ABC):
    """Apartment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, apartment_id: str) -> Optional[Apartment]:
        """Get apartment by ID"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str) -> Optional[Apartment]:
        """Get the apartment a tenant occupies"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Apartment]:
        """Get every apartment"""
        pass

    @abstractmethod
    async def list_by_status(self, status: ApartmentStatus) -> List[Apartment]:
        """Get apartments with the given occupancy status"""
        pass

    @abstractmethod
    async def create(self, apartment: Apartment) -> Apartment:
        """Create a new apartment"""
        pass

    @abstractmethod
    async def update(self, apartment: Apartment) -> Apartment:
        """Update existing apartment"""
        pass
