"""
Location Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel

from src.domain.entities import Location, LocationType


class Coordinates(BaseModel):
    """Plane offset on the community map"""

    x: float
    y: float


class LocationView(BaseModel):
    """Location as callers see it, with coordinates nested as {x, y}"""

    id: str
    name: str
    type: LocationType
    description: str
    coordinates: Coordinates

    @classmethod
    def from_entity(cls, location: Location) -> "LocationView":
        return cls(
            id=location.id,
            name=location.name,
            type=location.type,
            description=location.description,
            coordinates=Coordinates(x=location.coordinates_x, y=location.coordinates_y),
        )
