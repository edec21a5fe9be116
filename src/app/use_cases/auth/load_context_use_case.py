"""
Load Context Use Case

Loads the current user and their apartment for the identity in a token.
"""

from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.errors import BackendUnavailable, NotFoundError
from src.domain.result import Result, Return

from .dtos import ContextResponse


class LoadContextUseCase:
    """
    Business Rules:
    - User must still exist
    - The apartment is the one whose tenant_id is the user, if any
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[ContextResponse]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(NotFoundError("User not found"))
                apartment = await self.uow.apartments.get_by_tenant_id(user.id)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok(
            ContextResponse(user=CallerIdentity.from_user(user), apartment=apartment)
        )
