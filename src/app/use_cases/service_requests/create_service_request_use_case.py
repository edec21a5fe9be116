"""
Create Service Request Use Case

Records a new service request in the pending state.
"""

import logging

from src.app.services.notification_sink import INotificationSink, report_outcome
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import ServiceRequest, ServiceRequestStatus
from src.domain.errors import BackendUnavailable, ValidationError
from src.domain.result import Result, Return

from .dtos import CreateServiceRequestCommand

logger = logging.getLogger(__name__)


class CreateServiceRequestUseCase:
    """
    Use case for submitting a service request.

    Business Rules:
    - Description must not be blank
    - apartment_id and tenant_id must reference existing records, and the
      apartment must be rented by that tenant
    - New requests start as pending with created_at = now and no updated_at
    - Exactly one notification per call
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationSink):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, command: CreateServiceRequestCommand) -> Result[ServiceRequest]:
        try:
            result = await self._create(command)
        except StoreUnavailable as exc:
            logger.error(f"Service request not stored: {exc}")
            result = Return.err(BackendUnavailable(str(exc)))

        return report_outcome(
            self.notifier,
            "create_service_request",
            result,
            "Service request submitted successfully",
        )

    async def _create(self, command: CreateServiceRequestCommand) -> Result[ServiceRequest]:
        description = command.description.strip()
        if not description:
            return Return.err(ValidationError("Description must not be empty"))
        if not command.apartment_id or not command.tenant_id:
            return Return.err(ValidationError("apartment_id and tenant_id are required"))

        async with self.uow:
            apartment = await self.uow.apartments.get_by_id(command.apartment_id)
            if apartment is None:
                return Return.err(
                    ValidationError(f"Apartment {command.apartment_id} does not exist")
                )

            tenant = await self.uow.users.get_by_id(command.tenant_id)
            if tenant is None:
                return Return.err(ValidationError(f"User {command.tenant_id} does not exist"))
            if apartment.tenant_id != command.tenant_id:
                return Return.err(
                    ValidationError(
                        f"Apartment {apartment.number} is not rented by user {command.tenant_id}"
                    )
                )

            request = ServiceRequest(
                apartment_id=command.apartment_id,
                tenant_id=command.tenant_id,
                type=command.type,
                description=description,
                status=ServiceRequestStatus.pending,
            )
            request = await self.uow.service_requests.create(request)

            await self.uow.commit()

            return Return.ok(request)
