from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Location


class ILocationRepository(ABC):
    """Location repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, location_id: str) -> Optional[Location]:
        """Get location by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Location]:
        """Get every location"""
        pass

    @abstractmethod
    async def create(self, location: Location) -> Location:
        """Create a new location (reference data bootstrap)"""
        pass
