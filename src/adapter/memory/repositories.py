"""
In-memory repository implementations.

Each repository works on the staged tables of one InMemoryUnitOfWork and
returns fresh entity instances built from row dicts.
"""

from typing import Callable, Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel

from src.app.repositories.apartment_repository import IApartmentRepository
from src.app.repositories.location_repository import ILocationRepository
from src.app.repositories.payment_repository import IPaymentRepository
from src.app.repositories.service_request_repository import IServiceRequestRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import (
    Apartment,
    ApartmentStatus,
    Location,
    PaymentInfo,
    ServiceRequest,
    User,
)

from .store import Rows

M = TypeVar("M", bound=SQLModel)


class MemoryTable(Generic[M]):
    """Row storage shared by the in-memory repositories"""

    model: Type[M]

    def __init__(self, rows: Rows):
        self.rows = rows

    def _load(self, row: dict) -> M:
        return self.model(**row)

    def _find(self, record_id: str) -> Optional[M]:
        row = self.rows.get(record_id)
        return self._load(row) if row is not None else None

    def _select(self, predicate: Callable[[dict], bool] = lambda row: True) -> List[M]:
        return [self._load(row) for row in self.rows.values() if predicate(row)]

    def _save(self, entity: M) -> M:
        self.rows[entity.id] = entity.model_dump()
        return self._load(self.rows[entity.id])


class InMemoryUserRepository(MemoryTable[User], IUserRepository):
    model = User

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._find(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        users = self._select(lambda row: row["email"] == email)
        return users[0] if users else None

    async def list_all(self) -> List[User]:
        return self._select()

    async def create(self, user: User) -> User:
        return self._save(user)

    async def update(self, user: User) -> User:
        return self._save(user)


class InMemoryApartmentRepository(MemoryTable[Apartment], IApartmentRepository):
    model = Apartment

    async def get_by_id(self, apartment_id: str) -> Optional[Apartment]:
        return self._find(apartment_id)

    async def get_by_tenant_id(self, tenant_id: str) -> Optional[Apartment]:
        apartments = self._select(lambda row: row["tenant_id"] == tenant_id)
        return apartments[0] if apartments else None

    async def list_all(self) -> List[Apartment]:
        return self._select()

    async def list_by_status(self, status: ApartmentStatus) -> List[Apartment]:
        return self._select(lambda row: row["status"] == status)

    async def create(self, apartment: Apartment) -> Apartment:
        return self._save(apartment)

    async def update(self, apartment: Apartment) -> Apartment:
        return self._save(apartment)


class InMemoryServiceRequestRepository(MemoryTable[ServiceRequest], IServiceRequestRepository):
    model = ServiceRequest

    async def get_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        return self._find(request_id)

    async def list_all(self) -> List[ServiceRequest]:
        return self._select()

    async def list_by_tenant_id(self, tenant_id: str) -> List[ServiceRequest]:
        return self._select(lambda row: row["tenant_id"] == tenant_id)

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        return self._save(request)

    async def update(self, request: ServiceRequest) -> ServiceRequest:
        return self._save(request)


class InMemoryPaymentRepository(MemoryTable[PaymentInfo], IPaymentRepository):
    model = PaymentInfo

    async def get_by_id(self, payment_id: str) -> Optional[PaymentInfo]:
        return self._find(payment_id)

    async def list_all(self) -> List[PaymentInfo]:
        return self._select()

    async def list_by_tenant_id(self, tenant_id: str) -> List[PaymentInfo]:
        return self._select(lambda row: row["tenant_id"] == tenant_id)

    async def create(self, payment: PaymentInfo) -> PaymentInfo:
        return self._save(payment)


class InMemoryLocationRepository(MemoryTable[Location], ILocationRepository):
    model = Location

    async def get_by_id(self, location_id: str) -> Optional[Location]:
        return self._find(location_id)

    async def list_all(self) -> List[Location]:
        return self._select()

    async def create(self, location: Location) -> Location:
        return self._save(location)
