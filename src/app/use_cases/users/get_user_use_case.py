from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.entities import User
from src.domain.errors import BackendUnavailable, NotFoundError
from src.domain.result import Result, Return


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[User]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        if user is None:
            return Return.err(NotFoundError(f"User {user_id} not found"))
        return Return.ok(user)
