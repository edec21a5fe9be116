"""
Sign In Use Case

Resolves a caller identity from an email address.
"""

from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.errors import BackendUnavailable, NotFoundError
from src.domain.result import Result, Return


class SignInUseCase:
    """
    Demo sign-in.

    Business Rules:
    - No password check; credentials belong to the identity provider
    - Unknown email fails with NotFoundError
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[CallerIdentity]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email.strip().lower())
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        if user is None:
            return Return.err(NotFoundError("Invalid credentials"))

        return Return.ok(CallerIdentity.from_user(user))
