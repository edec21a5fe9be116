"""
Dashboard Use Cases
"""

from .dtos import ManagerSummary, ServiceRequestCounts, TenantSummary
from .manager_summary_use_case import ManagerSummaryUseCase
from .tenant_summary_use_case import TenantSummaryUseCase

__all__ = [
    "ManagerSummaryUseCase",
    "TenantSummaryUseCase",
    "ManagerSummary",
    "ServiceRequestCounts",
    "TenantSummary",
]
