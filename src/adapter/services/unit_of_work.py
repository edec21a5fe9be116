import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.apartment_repository import ApartmentRepository
from src.adapter.repositories.location_repository import LocationRepository
from src.adapter.repositories.payment_repository import PaymentRepository
from src.adapter.repositories.service_request_repository import ServiceRequestRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import StoreConflict, StoreUnavailable, UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.apartments = ApartmentRepository(self.session)
        self.service_requests = ServiceRequestRepository(self.session)
        self.payments = PaymentRepository(self.session)
        self.locations = LocationRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        # Loaded entities outlive the block, keep them out of the rollback's expiry
        self.session.expunge_all()
        try:
            await self.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")
        if isinstance(exc, IntegrityError):
            raise StoreConflict(str(exc)) from exc
        if isinstance(exc, SQLAlchemyError):
            raise StoreUnavailable(str(exc)) from exc

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
