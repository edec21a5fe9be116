from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.payment_repository import IPaymentRepository
from src.domain.entities import PaymentInfo


class PaymentRepository(IPaymentRepository):
    """Payment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, payment_id: str) -> Optional[PaymentInfo]:
        """Get payment by ID"""
        stmt = select(PaymentInfo).where(PaymentInfo.id == payment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[PaymentInfo]:
        """Get every payment"""
        result = await self.session.exec(select(PaymentInfo))
        return list(result.all())

    async def list_by_tenant_id(self, tenant_id: str) -> List[PaymentInfo]:
        """Get all payments made by a tenant"""
        stmt = select(PaymentInfo).where(PaymentInfo.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, payment: PaymentInfo) -> PaymentInfo:
        """Persist a settled payment"""
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment
