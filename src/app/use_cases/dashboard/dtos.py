"""
Dashboard Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Apartment, PaymentInfo, ServiceRequest


class ServiceRequestCounts(BaseModel):
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    total: int = 0


class ManagerSummary(BaseModel):
    """Building overview for managers"""

    total_apartments: int
    booked_apartments: int
    occupancy_rate: float
    total_tenants: int
    service_requests: ServiceRequestCounts


class TenantSummary(BaseModel):
    """Overview of one tenant's home, open requests and latest payments"""

    apartment: Optional[Apartment] = None
    pending_service_requests: List[ServiceRequest]
    recent_payments: List[PaymentInfo]
