"""
User Entity

Represents a tenant or a property manager.
"""

from typing import Optional

from sqlmodel import Field, SQLModel

from src.domain.base import generate_uuid

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - a tenant or a manager.

    Business Rules:
    - Email must be unique across all users
    - A manager never carries apartment_id
    - A tenant's apartment_id, when set, points at the apartment
      whose tenant_id is this user
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    role: UserRole = Field(default=UserRole.tenant)

    # users.apartment_id is a plain column; the enforced link is apartments.tenant_id
    apartment_id: Optional[str] = Field(default=None, index=True)
