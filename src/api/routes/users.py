from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, raise_denied, raise_for_error
from src.app.services.access_control import authorize
from src.app.services.notification_sink import INotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from src.depends import get_current_identity, get_notifier, get_unit_of_work
from src.domain.access import CallerIdentity, Capability
from src.domain.entities import User, UserRole

router = APIRouter(prefix="/users", tags=["Users"])


class CreateUserRequest(BaseModel):
    """
    Create user HTTP request payload

    Validates incoming request for registering a tenant or manager.
    """

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = Field(default=UserRole.tenant)
    apartment_id: Optional[str] = Field(default=None, description="Apartment to book for a tenant")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[User])
async def list_users(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Every user for managers, an empty list for tenants"""
    result = await ListUsersUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=User)
async def get_user(
    user_id: str,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: Tenant looking up someone else
        - 404 Not Found: Unknown user
    """
    if user_id != identity.id:
        denied = authorize(identity, Capability.view_users)
        if denied:
            raise ClientError(denied, status_code=status.HTTP_403_FORBIDDEN)

    result = await GetUserUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=User)
async def create_user(
    request: CreateUserRequest,
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSink = Depends(get_notifier),
):
    """
    Register a user; a tenant given an apartment books it.

    Raises:
        - 400 Bad Request: Manager with apartment, unknown or booked apartment
        - 403 Forbidden: Caller is not a manager
        - 409 Conflict: Email already registered
    """
    denied = authorize(identity, Capability.create_users)
    if denied:
        raise_denied(notifier, "create_user", denied)

    command = CreateUserCommand(
        email=request.email,
        name=request.name,
        role=request.role,
        apartment_id=request.apartment_id,
    )
    result = await CreateUserUseCase(uow, notifier).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
