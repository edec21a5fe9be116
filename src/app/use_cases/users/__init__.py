"""
User Management Use Cases

All user-related business logic.
"""

from .dtos import CreateUserCommand
from .create_user_use_case import CreateUserUseCase
from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserCommand",
]
