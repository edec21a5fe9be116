"""
Location Entity

Read-only neighbourhood reference data shown on the community map.
"""

from sqlmodel import Field, SQLModel

from src.domain.base import generate_uuid

from .enums import LocationType


class Location(SQLModel, table=True):
    """
    Location entity - a point of interest on the map.

    Coordinates are stored as two scalar columns; callers receive them
    nested as {x, y} (see LocationView).
    """

    __tablename__ = "locations"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(max_length=255)
    type: LocationType
    description: str

    coordinates_x: float
    coordinates_y: float
