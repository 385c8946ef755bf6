"""Custom exception hierarchy for outagemap."""

from __future__ import annotations


class OutageMapError(Exception):
    """Base exception for all outagemap errors."""


class OutageMapConfigError(OutageMapError):
    """Invalid or inconsistent configuration."""


class PlacementError(OutageMapError):
    """A report could not be created.

    Placement failures are scoped to a single creation attempt; nothing is
    stored and the user has to trigger the action again.
    """


class LocationUnavailableError(PlacementError):
    """The device location request failed or has not resolved yet."""

    def __init__(self, message: str = "Device location unavailable", *, reason: str = "") -> None:
        self.reason = reason
        super().__init__(message)


class OutsideServiceAreaError(PlacementError):
    """The device location resolved but lies outside the geofence."""

    def __init__(
        self,
        message: str = "Device is outside the service area",
        *,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(message)
