"""
Update Service Request Status Use Case

Moves a service request forward through pending -> in-progress -> completed.
"""

import logging
from datetime import UTC, datetime
from typing import Union

from src.app.services.notification_sink import INotificationSink, report_outcome
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import ServiceRequest, ServiceRequestStatus
from src.domain.errors import (
    BackendUnavailable,
    InvalidTransition,
    NotFoundError,
    ValidationError,
)
from src.domain.result import Result, Return

logger = logging.getLogger(__name__)


class UpdateServiceRequestStatusUseCase:
    """
    Use case for changing the status of a service request.

    Business Rules:
    - Legal: pending -> in-progress, pending -> completed, in-progress -> completed
    - Same-status and backwards changes fail with InvalidTransition
    - completed is terminal
    - updated_at = now on every legal transition, created_at untouched
    - Store is unchanged on any failure
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationSink):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, request_id: str, new_status: Union[str, ServiceRequestStatus]
    ) -> Result[ServiceRequest]:
        """
        Execute update status use case.

        Args:
            request_id: Service request to update
            new_status: Target status (pending/in-progress/completed)

        Returns:
            Result with the updated service request, or Error
        """
        try:
            result = await self._update(request_id, new_status)
        except StoreUnavailable as exc:
            logger.error(f"Service request {request_id} not updated: {exc}")
            result = Return.err(BackendUnavailable(str(exc)))

        success_message = ""
        if result.is_ok():
            success_message = f"Service request status updated to {result.value.status.value}"
        return report_outcome(
            self.notifier, "update_service_request_status", result, success_message
        )

    async def _update(
        self, request_id: str, new_status: Union[str, ServiceRequestStatus]
    ) -> Result[ServiceRequest]:
        try:
            target = ServiceRequestStatus(new_status)
        except ValueError:
            return Return.err(
                ValidationError(
                    f"Invalid status: {new_status}. Must be one of: pending, in-progress, completed"
                )
            )

        async with self.uow:
            request = await self.uow.service_requests.get_by_id(request_id)
            if request is None:
                return Return.err(NotFoundError(f"Service request {request_id} not found"))

            current = ServiceRequestStatus(request.status)
            if not current.can_advance_to(target):
                return Return.err(
                    InvalidTransition(
                        f"Cannot move service request from {current.value} to {target.value}"
                    )
                )

            request.status = target
            request.updated_at = datetime.now(UTC)
            request = await self.uow.service_requests.update(request)

            await self.uow.commit()

            return Return.ok(request)
