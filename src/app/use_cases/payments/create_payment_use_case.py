"""
Create Payment Use Case

Settles a payment through the gateway and records the outcome.
"""

import logging
import math
from datetime import UTC, datetime

from src.app.services.notification_sink import INotificationSink, report_outcome
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import PaymentInfo, PaymentStatus
from src.domain.errors import BackendUnavailable, PaymentDeclined, ValidationError
from src.domain.result import Result, Return

from .dtos import CreatePaymentCommand

logger = logging.getLogger(__name__)


class CreatePaymentUseCase:
    """
    Use case for paying rent or any other charge.

    Business Rules:
    - amount is a finite number > 0, description not blank
    - tenant_id and apartment_id must reference existing records, and the
      apartment must be rented by that tenant
    - Settlement happens outside the unit of work, so its delay never
      holds up other operations
    - Both outcomes are persisted with date = settlement time
    - A failed settlement returns PaymentDeclined carrying the stored record
    - Exactly one notification per call
    """

    def __init__(
        self, uow: UnitOfWork, gateway: IPaymentGateway, notifier: INotificationSink
    ):
        self.uow = uow
        self.gateway = gateway
        self.notifier = notifier

    async def execute(self, command: CreatePaymentCommand) -> Result[PaymentInfo]:
        try:
            result = await self._pay(command)
        except StoreUnavailable as exc:
            logger.error(f"Payment not stored: {exc}")
            result = Return.err(BackendUnavailable(str(exc)))

        return report_outcome(
            self.notifier, "create_payment", result, "Payment processed successfully"
        )

    async def _pay(self, command: CreatePaymentCommand) -> Result[PaymentInfo]:
        description = command.description.strip()
        if not math.isfinite(command.amount) or command.amount <= 0:
            return Return.err(ValidationError("Amount must be greater than zero"))
        if not description:
            return Return.err(ValidationError("Description must not be empty"))

        async with self.uow:
            if await self.uow.users.get_by_id(command.tenant_id) is None:
                return Return.err(ValidationError(f"User {command.tenant_id} does not exist"))
            apartment = await self.uow.apartments.get_by_id(command.apartment_id)
            if apartment is None:
                return Return.err(
                    ValidationError(f"Apartment {command.apartment_id} does not exist")
                )
            if apartment.tenant_id != command.tenant_id:
                return Return.err(
                    ValidationError(
                        f"Apartment {apartment.number} is not rented by user {command.tenant_id}"
                    )
                )

        status = await self.gateway.settle(command.amount, description)

        async with self.uow:
            payment = PaymentInfo(
                tenant_id=command.tenant_id,
                apartment_id=command.apartment_id,
                amount=command.amount,
                description=description,
                status=status,
                date=datetime.now(UTC),
            )
            payment = await self.uow.payments.create(payment)

            await self.uow.commit()

        if status == PaymentStatus.failed:
            return Return.err(PaymentDeclined(payment))

        return Return.ok(payment)
