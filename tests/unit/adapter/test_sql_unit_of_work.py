import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.unit_of_work import StoreConflict, StoreUnavailable
from src.app.use_cases.service_requests import (
    CreateServiceRequestCommand,
    CreateServiceRequestUseCase,
    ListServiceRequestsUseCase,
)
from src.domain.entities import ServiceType, User, UserRole


@pytest_asyncio.fixture
async def empty_session(tmp_path):
    # A database file without any tables
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def session(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_store_failure_surfaces_as_store_unavailable(empty_session):
    uow = SqlAlchemyUnitOfWork(empty_session)

    with pytest.raises(StoreUnavailable):
        async with uow:
            await uow.users.list_all()


@pytest.mark.asyncio
async def test_mutation_against_broken_store(empty_session, notifier):
    command = CreateServiceRequestCommand(
        apartment_id="1", tenant_id="2", type=ServiceType.cleaning, description="Windows"
    )

    result = await CreateServiceRequestUseCase(
        SqlAlchemyUnitOfWork(empty_session), notifier
    ).execute(command)

    assert result.is_err()
    assert result.error.code == "BACKEND_UNAVAILABLE"
    notifier.notify.assert_called_once()
    assert notifier.notify.call_args.args[0].code == "BACKEND_UNAVAILABLE"


@pytest.mark.asyncio
async def test_listing_against_broken_store(empty_session, manager):
    result = await ListServiceRequestsUseCase(SqlAlchemyUnitOfWork(empty_session)).execute(
        manager
    )

    assert result.is_err()
    assert result.error.code == "BACKEND_UNAVAILABLE"


@pytest.mark.asyncio
async def test_unique_email_violation_is_a_conflict(session):
    uow = SqlAlchemyUnitOfWork(session)
    async with uow:
        await uow.users.create(User(email="dup@example.com", name="First", role=UserRole.tenant))
        await uow.commit()

    with pytest.raises(StoreConflict):
        async with uow:
            await uow.users.create(
                User(email="dup@example.com", name="Second", role=UserRole.tenant)
            )

    async with uow:
        users = await uow.users.list_all()
    assert [user.name for user in users] == ["First"]
