"""
PaymentInfo Entity

Immutable record of a settled payment attempt.
"""

from datetime import UTC, datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_uuid

from .enums import PaymentStatus


class PaymentInfo(SQLModel, table=True):
    """
    PaymentInfo entity - one settled payment attempt.

    Business Rules:
    - Immutable (never updated or deleted)
    - Persisted only once settled: status is completed or failed
    - Failed attempts are kept for history
    """

    __tablename__ = "payments"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    tenant_id: str = Field(foreign_key="users.id", nullable=False, index=True)
    apartment_id: str = Field(foreign_key="apartments.id", nullable=False, index=True)

    amount: float = Field(gt=0)
    status: PaymentStatus = Field(default=PaymentStatus.pending)
    description: str

    # Settlement time
    date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True)),
    )
