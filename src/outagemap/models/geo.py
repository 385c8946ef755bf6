"""Coordinate and geofence models."""

from __future__ import annotations

from pydantic import AliasChoices, Field, model_validator

from outagemap._constants import SKN_EAST, SKN_NORTH, SKN_SOUTH, SKN_WEST
from outagemap.models._base import OutageMapBaseModel


class Coordinates(OutageMapBaseModel):
    """A latitude/longitude pair in degrees.

    Parameters
    ----------
    latitude : float
        Latitude in degrees, ``-90`` to ``90``.
    longitude : float
        Longitude in degrees, ``-180`` to ``180``.
    """

    latitude: float = Field(ge=-90.0, le=90.0, validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(ge=-180.0, le=180.0, validation_alias=AliasChoices("longitude", "lng", "lon"))

    @classmethod
    def of(cls, latitude: float, longitude: float) -> Coordinates:
        return cls(latitude=latitude, longitude=longitude)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class GeofenceBounds(OutageMapBaseModel):
    """Rectangular service area given by its four latitude/longitude limits.

    Defaults to St. Kitts & Nevis. The rectangle is not allowed to wrap
    around the antimeridian.
    """

    north: float = SKN_NORTH
    south: float = SKN_SOUTH
    east: float = SKN_EAST
    west: float = SKN_WEST

    @model_validator(mode="after")
    def _check_ordering(self) -> GeofenceBounds:
        if self.south > self.north:
            raise ValueError(f"south ({self.south}) must not exceed north ({self.north})")
        if self.west > self.east:
            raise ValueError(f"west ({self.west}) must not exceed east ({self.east})")
        return self
