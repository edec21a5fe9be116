"""
ServiceRequest Entity

Work requested by a tenant for their apartment.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import generate_uuid

from .enums import ServiceRequestStatus, ServiceType


class ServiceRequest(SQLModel, table=True):
    """
    ServiceRequest entity - work requested by a tenant.

    Business Rules:
    - created_at is set at creation and never changes
    - updated_at is set only when the status changes
    - status only advances: pending -> in-progress -> completed
    """

    __tablename__ = "service_requests"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    apartment_id: str = Field(foreign_key="apartments.id", nullable=False, index=True)
    tenant_id: str = Field(foreign_key="users.id", nullable=False, index=True)

    type: ServiceType = Field(nullable=False)
    description: str
    status: ServiceRequestStatus = Field(default=ServiceRequestStatus.pending)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True)),
    )
    updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_service_request_status", "status"),)
