"""
Service Request Use Case DTOs (Data Transfer Objects)

Command classes for the service request domain.
"""

from pydantic import BaseModel

from src.domain.entities import ServiceType


class CreateServiceRequestCommand(BaseModel):
    """
    Create service request command - a tenant asking for work on an apartment

    Created by the API layer (or the data service) after request validation.
    """

    apartment_id: str
    tenant_id: str
    type: ServiceType
    description: str
