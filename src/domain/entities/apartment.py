"""
Apartment Entity

A rentable unit in the building.
"""

from typing import Optional

from sqlmodel import Field, Index, SQLModel

from src.domain.base import generate_uuid

from .enums import ApartmentStatus


class Apartment(SQLModel, table=True):
    """
    Apartment entity - a rentable unit.

    Business Rules:
    - status is booked if and only if tenant_id is set
    - A tenant occupies at most one apartment
    - rent is strictly positive
    """

    __tablename__ = "apartments"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    number: str = Field(max_length=20)
    floor: int
    bedrooms: int
    bathrooms: int
    rent: float = Field(gt=0)

    status: ApartmentStatus = Field(default=ApartmentStatus.empty)
    tenant_id: Optional[str] = Field(default=None, foreign_key="users.id")

    __table_args__ = (Index("idx_apartment_status", "status"),)
