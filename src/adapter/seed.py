"""
Demo data bootstrap.

Populates an empty store with one building: ten apartments over three
floors, a manager, two tenants with their apartments, a couple of service
requests and payments, and the neighbourhood map.
"""

import logging
from datetime import UTC, datetime

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    Apartment,
    ApartmentStatus,
    Location,
    LocationType,
    PaymentInfo,
    PaymentStatus,
    ServiceRequest,
    ServiceRequestStatus,
    ServiceType,
    User,
    UserRole,
)

logger = logging.getLogger(__name__)


def demo_users():
    return [
        User(id="1", email="manager@example.com", name="Admin Manager", role=UserRole.manager),
        User(
            id="2",
            email="tenant1@example.com",
            name="John Doe",
            role=UserRole.tenant,
            apartment_id="1",
        ),
        User(
            id="3",
            email="tenant2@example.com",
            name="Jane Smith",
            role=UserRole.tenant,
            apartment_id="2",
        ),
    ]


def demo_apartments():
    # (id, number, floor, bedrooms, bathrooms, rent, tenant_id)
    rows = [
        ("1", "101", 1, 2, 1, 1200, "2"),
        ("2", "102", 1, 1, 1, 900, "3"),
        ("3", "103", 1, 2, 1, 1200, None),
        ("4", "201", 2, 3, 2, 1800, None),
        ("5", "202", 2, 2, 1, 1300, None),
        ("6", "203", 2, 1, 1, 950, None),
        ("7", "301", 3, 3, 2, 1900, None),
        ("8", "302", 3, 2, 2, 1500, None),
        ("9", "303", 3, 2, 1, 1250, None),
        ("10", "304", 3, 1, 1, 1000, None),
    ]
    return [
        Apartment(
            id=apartment_id,
            number=number,
            floor=floor,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            rent=rent,
            status=ApartmentStatus.booked if tenant_id else ApartmentStatus.empty,
            tenant_id=tenant_id,
        )
        for apartment_id, number, floor, bedrooms, bathrooms, rent, tenant_id in rows
    ]


def demo_service_requests():
    return [
        ServiceRequest(
            id="1",
            apartment_id="1",
            tenant_id="2",
            type=ServiceType.cleaning,
            description="Need apartment cleaned",
            status=ServiceRequestStatus.pending,
            created_at=datetime(2023, 4, 12, 10, 30, tzinfo=UTC),
        ),
        ServiceRequest(
            id="2",
            apartment_id="2",
            tenant_id="3",
            type=ServiceType.maintenance,
            description="The sink is leaking",
            status=ServiceRequestStatus.in_progress,
            created_at=datetime(2023, 4, 10, 8, 15, tzinfo=UTC),
            updated_at=datetime(2023, 4, 11, 14, 20, tzinfo=UTC),
        ),
    ]


def demo_payments():
    return [
        PaymentInfo(
            id="1",
            tenant_id="2",
            apartment_id="1",
            amount=1200,
            status=PaymentStatus.completed,
            date=datetime(2023, 4, 1, tzinfo=UTC),
            description="April Rent",
        ),
        PaymentInfo(
            id="2",
            tenant_id="3",
            apartment_id="2",
            amount=900,
            status=PaymentStatus.completed,
            date=datetime(2023, 4, 2, tzinfo=UTC),
            description="April Rent",
        ),
    ]


def demo_locations():
    # (id, name, type, description, x, y)
    rows = [
        ("1", "Central Park", LocationType.park, "Beautiful park with walking trails", 100, 150),
        ("2", "Lakeside Temple", LocationType.temple, "Peaceful temple by the lake", 220, 100),
        ("3", "Fitness Center", LocationType.gym, "24/7 fitness center with modern equipment", 180, 200),
        ("4", "Community Pool", LocationType.pool, "Outdoor swimming pool", 150, 250),
        ("5", "Mini Mart", LocationType.store, "Convenience store for daily needs", 80, 120),
    ]
    return [
        Location(
            id=location_id,
            name=name,
            type=location_type,
            description=description,
            coordinates_x=x,
            coordinates_y=y,
        )
        for location_id, name, location_type, description, x, y in rows
    ]


async def seed_demo_data(uow: UnitOfWork) -> bool:
    """
    Load the demo building into an empty store.

    Returns:
        False without writing anything when users already exist
    """
    async with uow:
        if await uow.users.list_all():
            logger.info("Store already populated, skipping demo data")
            return False

        for user in demo_users():
            await uow.users.create(user)
        for apartment in demo_apartments():
            await uow.apartments.create(apartment)
        for request in demo_service_requests():
            await uow.service_requests.create(request)
        for payment in demo_payments():
            await uow.payments.create(payment)
        for location in demo_locations():
            await uow.locations.create(location)

        await uow.commit()

    logger.info("Demo data loaded")
    return True
