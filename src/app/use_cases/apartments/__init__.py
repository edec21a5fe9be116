"""
Apartment Use Cases
"""

from .list_apartments_use_case import ListApartmentsUseCase
from .get_apartment_use_case import GetApartmentUseCase

__all__ = [
    "ListApartmentsUseCase",
    "GetApartmentUseCase",
]
