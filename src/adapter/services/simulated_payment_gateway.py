"""
Simulated Payment Gateway

Stand-in for a real processor: waits a fixed delay, then settles with one
uniform draw from an injected random source.
"""

import asyncio
import logging
import random
from typing import Optional

from src.app.services.payment_gateway import IPaymentGateway
from src.domain.entities import PaymentStatus

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.5
DEFAULT_SUCCESS_RATE = 0.8


class SimulatedPaymentGateway(IPaymentGateway):
    """
    Settles payments at random.

    Business Rules:
    - Exactly one draw per settlement
    - completed with probability success_rate, failed otherwise
    - The delay is an asyncio sleep, other coroutines keep running
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        success_rate: float = DEFAULT_SUCCESS_RATE,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(f"success_rate must be within [0, 1], got {success_rate}")
        self.rng = rng if rng is not None else random.Random()
        self.delay_seconds = delay_seconds
        self.success_rate = success_rate

    async def settle(self, amount: float, description: str) -> PaymentStatus:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        draw = self.rng.random()
        status = PaymentStatus.completed if draw < self.success_rate else PaymentStatus.failed
        logger.debug(f"Settled payment '{description}' of {amount}: {status.value}")
        return status
