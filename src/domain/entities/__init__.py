"""
Property Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    ApartmentStatus,
    ServiceType,
    ServiceRequestStatus,
    PaymentStatus,
    LocationType,
)

# Export all entities
from .user import User
from .apartment import Apartment
from .service_request import ServiceRequest
from .payment import PaymentInfo
from .location import Location

__all__ = [
    # Enums
    "UserRole",
    "ApartmentStatus",
    "ServiceType",
    "ServiceRequestStatus",
    "PaymentStatus",
    "LocationType",
    # Entities
    "User",
    "Apartment",
    "ServiceRequest",
    "PaymentInfo",
    "Location",
]
