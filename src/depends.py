from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.memory.unit_of_work import InMemoryUnitOfWork
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import identity_from_payload, verify_jwt
from src.app.services.notification_sink import INotificationSink
from src.app.services.payment_gateway import IPaymentGateway
from src.domain.access import CallerIdentity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work(request: Request):
    if ApplicationConfig.STORE_BACKEND == "memory":
        yield InMemoryUnitOfWork(request.app.state.entity_store)
        return

    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier(request: Request) -> INotificationSink:
    return request.app.state.notifier


def get_payment_gateway(request: Request) -> IPaymentGateway:
    return request.app.state.payment_gateway


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> CallerIdentity:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Caller identity carried by the token

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)
    identity = identity_from_payload(payload) if payload is not None else None

    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return identity
