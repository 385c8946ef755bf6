"""Result of a one-shot device location request.

A request either produces a :class:`LocationFix` or a
:class:`LocationFailure`. Callers receive the union as a plain value and
branch on it, so placement logic can be exercised without a real device.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from outagemap.models._base import OutageMapBaseModel, UtcDatetime, utcnow
from outagemap.models.geo import Coordinates


class LocationFix(OutageMapBaseModel):
    status: Literal["fix"] = "fix"
    coordinates: Coordinates
    observed_at: UtcDatetime = Field(default_factory=utcnow)

    @classmethod
    def at(cls, latitude: float, longitude: float) -> LocationFix:
        return cls(coordinates=Coordinates.of(latitude, longitude))


class LocationFailure(OutageMapBaseModel):
    status: Literal["failure"] = "failure"
    reason: str = ""


LocationResult = LocationFix | LocationFailure
