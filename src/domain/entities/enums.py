"""
Property Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Coarse permission class of a user"""

    tenant = "tenant"
    manager = "manager"


class ApartmentStatus(str, Enum):
    """Apartment occupancy"""

    empty = "empty"
    booked = "booked"


class ServiceType(str, Enum):
    """Kind of work a service request asks for"""

    cleaning = "cleaning"
    maintenance = "maintenance"
    plumbing = "plumbing"
    electrical = "electrical"
    other = "other"


class ServiceRequestStatus(str, Enum):
    """Service request progress, only ever moves forward"""

    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"

    @property
    def rank(self) -> int:
        return _SERVICE_REQUEST_ORDER.index(self)

    def can_advance_to(self, new_status: "ServiceRequestStatus") -> bool:
        """True when new_status lies strictly after this status"""
        return new_status.rank > self.rank


_SERVICE_REQUEST_ORDER = [
    ServiceRequestStatus.pending,
    ServiceRequestStatus.in_progress,
    ServiceRequestStatus.completed,
]


class PaymentStatus(str, Enum):
    """Payment settlement outcome"""

    pending = "pending"
    completed = "completed"
    failed = "failed"


class LocationType(str, Enum):
    """Kind of neighbourhood point of interest"""

    temple = "temple"
    park = "park"
    gym = "gym"
    pool = "pool"
    store = "store"
    restaurant = "restaurant"
    parking = "parking"
