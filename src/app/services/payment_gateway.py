from abc import ABC, abstractmethod

from src.domain.entities import PaymentStatus


class IPaymentGateway(ABC):
    """Payment gateway interface - decides how a payment settles"""

    @abstractmethod
    async def settle(self, amount: float, description: str) -> PaymentStatus:
        """
        Settle a payment.

        Returns:
            PaymentStatus.completed or PaymentStatus.failed, never pending
        """
        pass
