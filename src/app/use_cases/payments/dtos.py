"""
Payment Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class CreatePaymentCommand(BaseModel):
    """
    Create payment command - a tenant paying for an apartment

    Status and date are decided by settlement, never by the caller.
    """

    tenant_id: str
    apartment_id: str
    amount: float
    description: str
