from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import ContextResponse, LoadContextUseCase, SignInUseCase
from src.depends import get_current_identity, get_unit_of_work
from src.domain.access import CallerIdentity

router = APIRouter(tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Demo sign-in: the email alone identifies the user.
    """

    email: EmailStr = Field(..., description="User email address")


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: CallerIdentity


@router.post("/auth/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Sign in and receive a bearer token carrying the caller identity.

    Raises:
        - 404 Not Found: No user with that email
        - 422 Unprocessable Entity: Malformed email (handled by FastAPI)
    """
    result = await SignInUseCase(uow).execute(request.email)
    if result.is_err():
        raise_for_error(result.error)

    identity = result.value
    return LoginResponse(access_token=generate_jwt(identity), user=identity)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ContextResponse)
async def get_me(
    identity: CallerIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user and the apartment they occupy.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: User no longer exists
    """
    result = await LoadContextUseCase(uow).execute(identity.id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
