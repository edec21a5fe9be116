from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.service_request_repository import IServiceRequestRepository
from src.domain.entities import ServiceRequest


class ServiceRequestRepository(IServiceRequestRepository):
    """Service request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        """Get service request by ID"""
        stmt = select(ServiceRequest).where(ServiceRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[ServiceRequest]:
        """Get every service request"""
        result = await self.session.exec(select(ServiceRequest))
        return list(result.all())

    async def list_by_tenant_id(self, tenant_id: str) -> List[ServiceRequest]:
        """Get all service requests submitted by a tenant"""
        stmt = select(ServiceRequest).where(ServiceRequest.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        """Create a new service request"""
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def update(self, request: ServiceRequest) -> ServiceRequest:
        """Update existing service request"""
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request
