from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_denied, raise_for_error
from src.app.services.access_control import authorize
from src.app.services.notification_sink import INotificationSink
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.payments import (
    CreatePaymentCommand,
    CreatePaymentUseCase,
    ListPaymentsUseCase,
)
from src.depends import (
    get_current_identity,
    get_notifier,
    get_payment_gateway,
    get_unit_of_work,
)
from src.domain.access import CallerIdentity, Capability
from src.domain.entities import PaymentInfo

router = APIRouter(prefix="/payments", tags=["Payments"])


class CreatePaymentRequest(BaseModel):
    """
    Create payment HTTP request payload

    tenant_id and apartment_id default to the caller and the caller's apartment.
    """

    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=255)
    apartment_id: Optional[str] = None
    tenant_id: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PaymentInfo])
async def list_payments(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Managers get every payment, tenants only their own"""
    result = await ListPaymentsUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PaymentInfo)
async def create_payment(
    request: CreatePaymentRequest,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
    notifier: INotificationSink = Depends(get_notifier),
):
    """
    Pay and wait for settlement.

    The payment is stored whatever the outcome.

    Raises:
        - 400 Bad Request: Unknown apartment/tenant, or apartment rented by someone else
        - 402 Payment Required: Settlement failed, body carries the stored payment
        - 403 Forbidden: Caller is not a tenant, or pays for someone else
    """
    tenant_id = request.tenant_id or identity.id
    denied = authorize(identity, Capability.create_own_payments, tenant_id)
    if denied:
        raise_denied(notifier, "create_payment", denied)

    command = CreatePaymentCommand(
        tenant_id=tenant_id,
        apartment_id=request.apartment_id or identity.apartment_id or "",
        amount=request.amount,
        description=request.description,
    )
    result = await CreatePaymentUseCase(uow, gateway, notifier).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
