"""
User Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import UserRole


class CreateUserCommand(BaseModel):
    """
    Create user command - a manager registering a tenant or another manager

    apartment_id is only meaningful for tenants.
    """

    email: str
    name: str
    role: UserRole = UserRole.tenant
    apartment_id: Optional[str] = None
