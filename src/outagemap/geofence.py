"""Service-area predicate.

Every code path that gates report creation goes through
:class:`GeofenceValidator`; there is no other notion of "inside the island".
"""

from __future__ import annotations

from outagemap.models.geo import Coordinates, GeofenceBounds


class GeofenceValidator:
    """Inclusive rectangular geofence check."""

    def __init__(self, bounds: GeofenceBounds | None = None) -> None:
        self._bounds = bounds if bounds is not None else GeofenceBounds()

    @property
    def bounds(self) -> GeofenceBounds:
        return self._bounds

    def is_inside(self, lat: float, lng: float) -> bool:
        """Return ``True`` when ``(lat, lng)`` is within the bounds, edges included."""
        b = self._bounds
        return b.south <= lat <= b.north and b.west <= lng <= b.east

    def contains(self, coordinates: Coordinates) -> bool:
        return self.is_inside(coordinates.latitude, coordinates.longitude)
