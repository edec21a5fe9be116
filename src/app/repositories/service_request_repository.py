from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import ServiceRequest


class IServiceRequestRepository(ABC):
    """Service request repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        """Get service request by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[ServiceRequest]:
        """Get every service request"""
        pass

    @abstractmethod
    async def list_by_tenant_id(self, tenant_id: str) -> List[ServiceRequest]:
        """Get all service requests submitted by a tenant"""
        pass

    @abstractmethod
    async def create(self, request: ServiceRequest) -> ServiceRequest:
        """Create a new service request"""
        pass

    @abstractmethod
    async def update(self, request: ServiceRequest) -> ServiceRequest:
        """Update existing service request"""
        pass
