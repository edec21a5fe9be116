"""
Create User Use Case

Registers a user and, for a tenant with an apartment, books that apartment
in the same transaction.
"""

import logging

from src.app.services.notification_sink import INotificationSink, report_outcome
from src.app.services.unit_of_work import StoreConflict, StoreUnavailable, UnitOfWork
from src.domain.entities import ApartmentStatus, User, UserRole
from src.domain.errors import BackendUnavailable, DuplicateEmailError, ValidationError
from src.domain.result import Result, Return

from .dtos import CreateUserCommand

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.

    Business Rules:
    - Email is trimmed, lower-cased and must be unique
    - Name must not be blank
    - A manager never carries apartment_id
    - A tenant's apartment must exist and be empty
    - User insert and apartment booking (status=booked, tenant_id=user.id)
      commit together or not at all
    - Exactly one notification per call
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationSink):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, command: CreateUserCommand) -> Result[User]:
        try:
            result = await self._create(command)
        except StoreConflict as exc:
            # Lost a race with a concurrent insert of the same email
            logger.warning(f"User not stored: {exc}")
            result = Return.err(DuplicateEmailError(command.email.strip().lower()))
        except StoreUnavailable as exc:
            logger.error(f"User not stored: {exc}")
            result = Return.err(BackendUnavailable(str(exc)))

        return report_outcome(self.notifier, "create_user", result, "User created successfully")

    async def _create(self, command: CreateUserCommand) -> Result[User]:
        email = command.email.strip().lower()
        name = command.name.strip()
        if not email or "@" not in email:
            return Return.err(ValidationError(f"Invalid email: {command.email}"))
        if not name:
            return Return.err(ValidationError("Name must not be empty"))
        if command.role == UserRole.manager and command.apartment_id:
            return Return.err(ValidationError("Managers cannot be assigned an apartment"))

        async with self.uow:
            if await self.uow.users.get_by_email(email):
                return Return.err(DuplicateEmailError(email))

            apartment = None
            if command.apartment_id:
                apartment = await self.uow.apartments.get_by_id(command.apartment_id)
                if apartment is None:
                    return Return.err(
                        ValidationError(f"Apartment {command.apartment_id} does not exist")
                    )
                if apartment.status != ApartmentStatus.empty or apartment.tenant_id:
                    return Return.err(
                        ValidationError(f"Apartment {apartment.number} is already booked")
                    )

            user = User(
                email=email,
                name=name,
                role=command.role,
                apartment_id=apartment.id if apartment else None,
            )
            user = await self.uow.users.create(user)

            if apartment is not None:
                apartment.status = ApartmentStatus.booked
                apartment.tenant_id = user.id
                await self.uow.apartments.update(apartment)

            await self.uow.commit()

            return Return.ok(user)
