from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_denied, raise_for_error
from src.app.services.access_control import authorize
from src.app.services.notification_sink import INotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.service_requests import (
    CreateServiceRequestCommand,
    CreateServiceRequestUseCase,
    GetServiceRequestUseCase,
    ListServiceRequestsUseCase,
    UpdateServiceRequestStatusUseCase,
)
from src.depends import get_current_identity, get_notifier, get_unit_of_work
from src.domain.access import CallerIdentity, Capability
from src.domain.entities import ServiceRequest, ServiceType

router = APIRouter(prefix="/service-requests", tags=["Service Requests"])


class CreateServiceRequestRequest(BaseModel):
    """
    Create service request HTTP request payload

    tenant_id and apartment_id default to the caller and the caller's apartment.
    """

    type: ServiceType = Field(..., description="cleaning/maintenance/plumbing/electrical/other")
    description: str = Field(..., min_length=1, max_length=2000)
    apartment_id: Optional[str] = None
    tenant_id: Optional[str] = None


class UpdateStatusRequest(BaseModel):
    status: str = Field(..., description="pending/in-progress/completed")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ServiceRequest])
async def list_service_requests(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Managers get every request, tenants only their own"""
    result = await ListServiceRequestsUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{request_id}", status_code=status.HTTP_200_OK, response_model=ServiceRequest)
async def get_service_request(
    request_id: str,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetServiceRequestUseCase(uow).execute(identity, request_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ServiceRequest)
async def create_service_request(
    request: CreateServiceRequestRequest,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSink = Depends(get_notifier),
):
    """
    Submit a service request.

    Raises:
        - 400 Bad Request: Blank description, unknown apartment/tenant, or
          apartment rented by someone else
        - 403 Forbidden: Caller is not a tenant, or files for someone else
    """
    tenant_id = request.tenant_id or identity.id
    denied = authorize(identity, Capability.create_own_service_requests, tenant_id)
    if denied:
        raise_denied(notifier, "create_service_request", denied)

    command = CreateServiceRequestCommand(
        apartment_id=request.apartment_id or identity.apartment_id or "",
        tenant_id=tenant_id,
        type=request.type,
        description=request.description,
    )
    result = await CreateServiceRequestUseCase(uow, notifier).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{request_id}/status", status_code=status.HTTP_200_OK, response_model=ServiceRequest
)
async def update_service_request_status(
    request_id: str,
    request: UpdateStatusRequest,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSink = Depends(get_notifier),
):
    """
    Advance a service request.

    Raises:
        - 400 Bad Request: Unknown status value
        - 403 Forbidden: Caller is not a manager
        - 404 Not Found: Unknown service request
        - 409 Conflict: Status does not move forward
    """
    denied = authorize(identity, Capability.update_service_requests)
    if denied:
        raise_denied(notifier, "update_service_request_status", denied)

    result = await UpdateServiceRequestStatusUseCase(uow, notifier).execute(
        request_id, request.status
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value
