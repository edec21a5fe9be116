from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import PaymentInfo


class IPaymentRepository(ABC):
    """Payment repository interface - application layer

    Payments are immutable, so there is no update.
    """

    @abstractmethod
    async def get_by_id(self, payment_id: str) -> Optional[PaymentInfo]:
        """Get payment by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[PaymentInfo]:
        """Get every payment"""
        pass

    @abstractmethod
    async def list_by_tenant_id(self, tenant_id: str) -> List[PaymentInfo]:
        """Get all payments made by a tenant"""
        pass

    @abstractmethod
    async def create(self, payment: PaymentInfo) -> PaymentInfo:
        """Persist a settled payment"""
        pass
