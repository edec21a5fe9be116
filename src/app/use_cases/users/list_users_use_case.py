from typing import List

from src.app.services.access_control import can_view_users
from src.app.services.unit_of_work import StoreUnavailable, UnitOfWork
from src.domain.access import CallerIdentity
from src.domain.entities import User
from src.domain.errors import BackendUnavailable
from src.domain.result import Result, Return


class ListUsersUseCase:
    """Managers see every user; tenants get an empty list"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[List[User]]:
        if not can_view_users(caller):
            return Return.ok([])

        try:
            async with self.uow:
                users = await self.uow.users.list_all()
        except StoreUnavailable as exc:
            return Return.err(BackendUnavailable(str(exc)))

        return Return.ok(users)
