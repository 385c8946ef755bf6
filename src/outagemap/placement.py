"""Dual-origin placement policy.

Authorization is always anchored to the reporting device: the device must be
inside the service area for either report kind. The coordinates stamped on
the report depend on the kind:

* ``outage``  -> the device location (the reporter is at the outage).
* ``working`` -> the current map viewport center (a responder marks a work
  site they can see on the map, which may differ from where they stand).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from outagemap.exceptions import LocationUnavailableError, OutsideServiceAreaError
from outagemap.geofence import GeofenceValidator
from outagemap.models._base import ensure_utc, utcnow
from outagemap.models.geo import Coordinates
from outagemap.models.location import LocationFailure, LocationResult
from outagemap.models.report import OutageReport, ReportKind
from outagemap.state.store import ReportStore
from outagemap.surfaces import ViewportSource

_logger = logging.getLogger(__name__)


def _authorized_device_location(
    device_location: LocationResult | None,
    validator: GeofenceValidator,
) -> Coordinates:
    """Return the device coordinates, or raise if creation is not allowed."""
    if device_location is None:
        raise LocationUnavailableError("Device location has not resolved yet", reason="pending")
    if isinstance(device_location, LocationFailure):
        raise LocationUnavailableError(
            f"Device location request failed: {device_location.reason or 'unknown'}",
            reason=device_location.reason,
        )

    coords = device_location.coordinates
    if not validator.contains(coords):
        raise OutsideServiceAreaError(
            f"Device at ({coords.latitude}, {coords.longitude}) is outside the service area",
            latitude=coords.latitude,
            longitude=coords.longitude,
        )
    return coords


class PlacementResolver:
    """Authorize report creation and decide where the report is anchored."""

    def __init__(
        self,
        *,
        validator: GeofenceValidator,
        store: ReportStore,
        viewport: ViewportSource,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._validator = validator
        self._store = store
        self._viewport = viewport
        self._clock = clock

    def resolve(self, kind: ReportKind, device_location: LocationResult | None) -> Coordinates:
        """Return the coordinates a new *kind* report would be stamped with.

        Raises
        ------
        LocationUnavailableError
            No device location (pending or failed).
        OutsideServiceAreaError
            The device is outside the geofence, whatever the kind.
        """
        device = _authorized_device_location(device_location, self._validator)
        if kind is ReportKind.WORKING:
            center = self._viewport.get_viewport_center()
            _logger.debug(
                "Working report anchored at viewport center (%s, %s); device at (%s, %s)",
                center.latitude,
                center.longitude,
                device.latitude,
                device.longitude,
            )
            return center
        return device

    def create_report(self, kind: ReportKind, device_location: LocationResult | None) -> OutageReport:
        """Build a report of *kind* and add it to the store."""
        try:
            coordinates = self.resolve(kind, device_location)
        except (LocationUnavailableError, OutsideServiceAreaError) as exc:
            _logger.warning("Rejected %s report: %s", kind, exc)
            raise

        report = OutageReport.create(kind, coordinates, now=ensure_utc(self._clock()))
        self._store.add(report)
        return report
