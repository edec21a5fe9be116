from abc import ABC, abstractmethod

from src.app.repositories.apartment_repository import IApartmentRepository
from src.app.repositories.location_repository import ILocationRepository
from src.app.repositories.payment_repository import IPaymentRepository
from src.app.repositories.service_request_repository import IServiceRequestRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    apartments: IApartmentRepository
    service_requests: IServiceRequestRepository
    payments: IPaymentRepository
    locations: ILocationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


class StoreUnavailable(Exception):
    """Raised by a unit of work when its backing store fails"""

    pass


class StoreConflict(StoreUnavailable):
    """Raised when a write breaks a uniqueness or integrity constraint of the store"""

    pass
