import pytest
import pytest_asyncio

from src.adapter.memory.store import EntityStore
from src.adapter.memory.unit_of_work import InMemoryUnitOfWork
from src.adapter.seed import seed_demo_data
from src.domain.entities import ApartmentStatus, User, UserRole


@pytest_asyncio.fixture
async def store():
    store = EntityStore()
    await seed_demo_data(InMemoryUnitOfWork(store))
    return store


@pytest.mark.asyncio
async def test_seed_loads_demo_building(store):
    assert store.count("users") == 3
    assert store.count("apartments") == 10
    assert store.count("service_requests") == 2
    assert store.count("payments") == 2
    assert store.count("locations") == 5


@pytest.mark.asyncio
async def test_seed_skips_populated_store(store):
    assert await seed_demo_data(InMemoryUnitOfWork(store)) is False
    assert store.count("users") == 3


@pytest.mark.asyncio
async def test_uncommitted_writes_are_discarded(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        await uow.users.create(
            User(email="ghost@example.com", name="Ghost", role=UserRole.tenant)
        )

    assert store.count("users") == 3


@pytest.mark.asyncio
async def test_error_inside_unit_of_work_leaves_store_untouched(store):
    uow = InMemoryUnitOfWork(store)
    with pytest.raises(RuntimeError):
        async with uow:
            apartment = await uow.apartments.get_by_id("3")
            apartment.status = ApartmentStatus.booked
            await uow.apartments.update(apartment)
            raise RuntimeError("boom")

    async with uow:
        apartment = await uow.apartments.get_by_id("3")
    assert apartment.status == ApartmentStatus.empty


@pytest.mark.asyncio
async def test_returned_entities_are_detached(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        apartment = await uow.apartments.get_by_id("1")

    apartment.rent = 1

    async with uow:
        fresh = await uow.apartments.get_by_id("1")
    assert fresh.rent == 1200


@pytest.mark.asyncio
async def test_committed_writes_are_visible(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        await uow.users.create(
            User(id="4", email="new@example.com", name="New", role=UserRole.tenant)
        )
        await uow.commit()

    async with uow:
        user = await uow.users.get_by_email("new@example.com")
    assert user.id == "4"
    assert store.count("users") == 4


@pytest.mark.asyncio
async def test_listing_by_status(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        booked = await uow.apartments.list_by_status(ApartmentStatus.booked)

    assert sorted(apartment.id for apartment in booked) == ["1", "2"]
