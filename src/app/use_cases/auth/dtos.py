"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.access import CallerIdentity
from src.domain.entities import Apartment


class ContextResponse(BaseModel):
    """Signed-in user together with the apartment they occupy"""

    user: CallerIdentity
    apartment: Optional[Apartment] = None
