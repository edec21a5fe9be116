from src.app.services.unit_of_work import UnitOfWork

from .repositories import (
    InMemoryApartmentRepository,
    InMemoryLocationRepository,
    InMemoryPaymentRepository,
    InMemoryServiceRequestRepository,
    InMemoryUserRepository,
)
from .store import EntityStore


class InMemoryUnitOfWork(UnitOfWork):
    """
    In-memory implementation of UnitOfWork pattern.

    Holds the store lock while open, so units of work never interleave.
    Repositories write to a staged copy that commit() publishes whole;
    leaving without commit() discards it.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    async def __aenter__(self):
        await self.store.lock.acquire()
        self._stage()
        return self

    async def __aexit__(self, *args):
        try:
            await self.rollback()
        finally:
            self.store.lock.release()

    async def commit(self):
        self.store.publish(self._tables)
        self._stage()

    async def rollback(self):
        self._stage()

    def _stage(self):
        self._tables = self.store.snapshot()
        self.users = InMemoryUserRepository(self._tables["users"])
        self.apartments = InMemoryApartmentRepository(self._tables["apartments"])
        self.service_requests = InMemoryServiceRequestRepository(
            self._tables["service_requests"]
        )
        self.payments = InMemoryPaymentRepository(self._tables["payments"])
        self.locations = InMemoryLocationRepository(self._tables["locations"])
