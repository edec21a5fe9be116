"""
Location Use Cases
"""

from .dtos import Coordinates, LocationView
from .list_locations_use_case import ListLocationsUseCase

__all__ = [
    "ListLocationsUseCase",
    "Coordinates",
    "LocationView",
]
