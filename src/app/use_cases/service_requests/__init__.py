"""
Service Request Use Cases

Submitting, progressing and listing service requests.
"""

from .dtos import CreateServiceRequestCommand
from .create_service_request_use_case import CreateServiceRequestUseCase
from .update_service_request_status_use_case import UpdateServiceRequestStatusUseCase
from .list_service_requests_use_case import ListServiceRequestsUseCase
from .get_service_request_use_case import GetServiceRequestUseCase

__all__ = [
    # Use Cases
    "CreateServiceRequestUseCase",
    "UpdateServiceRequestStatusUseCase",
    "ListServiceRequestsUseCase",
    "GetServiceRequestUseCase",
    # DTOs - Commands
    "CreateServiceRequestCommand",
]
