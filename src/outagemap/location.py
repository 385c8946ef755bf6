"""One-shot device location tracking."""

from __future__ import annotations

import logging

from outagemap.models.location import LocationFailure, LocationFix, LocationResult
from outagemap.surfaces import LocationProvider

_logger = logging.getLogger(__name__)


class DeviceLocationTracker:
    """Holds the outcome of the single location request made per mount.

    ``current`` is ``None`` while the request is pending. Creation attempts
    made in that window see the location as unavailable; they are not
    deferred.
    """

    def __init__(self) -> None:
        self._result: LocationResult | None = None

    @property
    def current(self) -> LocationResult | None:
        return self._result

    @property
    def fix(self) -> LocationFix | None:
        return self._result if isinstance(self._result, LocationFix) else None

    async def request(self, provider: LocationProvider) -> LocationResult:
        """Await *provider* once and remember its result.

        Provider exceptions are folded into a :class:`LocationFailure` so the
        caller always gets a value back.
        """
        try:
            result = await provider()
        except Exception as exc:  # noqa: BLE001
            _logger.debug("Location provider raised", exc_info=True)
            result = LocationFailure(reason=str(exc) or type(exc).__name__)

        if isinstance(result, LocationFailure):
            _logger.warning("Device location unavailable: %s", result.reason or "unknown")
        else:
            _logger.debug(
                "Device location resolved lat=%s lng=%s",
                result.coordinates.latitude,
                result.coordinates.longitude,
            )
        self._result = result
        return result

    def reset(self) -> None:
        self._result = None
