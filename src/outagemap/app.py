"""Outage map view: wires the lifecycle components to the host UI."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from outagemap._constants import NOTICE_LOCATION_UNAVAILABLE, NOTICE_OUTSIDE_SERVICE_AREA
from outagemap.config import OutageMapConfig
from outagemap.exceptions import LocationUnavailableError, OutsideServiceAreaError
from outagemap.geofence import GeofenceValidator
from outagemap.location import DeviceLocationTracker
from outagemap.models._base import utcnow
from outagemap.models.location import LocationFix, LocationResult
from outagemap.models.marker import MarkerSpec
from outagemap.models.report import OutageReport, ReportKind
from outagemap.placement import PlacementResolver
from outagemap.rendering import build_markers
from outagemap.state.store import ReportStore
from outagemap.surfaces import LocationProvider, MapSurface, Notifier
from outagemap.sweeper import ExpirySweeper

_logger = logging.getLogger(__name__)


class OutageMapApp:
    """The owning view of the report lifecycle.

    Usage::

        async with OutageMapApp(map_surface, location_provider=gps, notify=alert) as app:
            app.report_outage()

    Entering the context mounts the view (starts the expiry sweeper, requests
    the device location once and recenters the map); leaving it stops the
    sweeper. Reports do not survive an unmount/remount of a new instance.
    """

    def __init__(
        self,
        map_surface: MapSurface,
        *,
        config: OutageMapConfig | None = None,
        location_provider: LocationProvider | None = None,
        notify: Notifier | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config if config is not None else OutageMapConfig()
        self._map = map_surface
        self._location_provider = location_provider
        self._notify = notify
        self._clock = clock
        self._validator = GeofenceValidator(self._config.bounds)
        self._store = ReportStore(clock=clock)
        self._tracker = DeviceLocationTracker()
        self._resolver = PlacementResolver(
            validator=self._validator,
            store=self._store,
            viewport=map_surface,
            clock=clock,
        )
        self._sweeper = ExpirySweeper(
            self._store,
            interval=self._config.sweep_interval,
            clock=clock,
            on_sweep=self._on_sweep,
        )
        self._mounted = False

    @property
    def config(self) -> OutageMapConfig:
        return self._config

    @property
    def store(self) -> ReportStore:
        return self._store

    @property
    def validator(self) -> GeofenceValidator:
        return self._validator

    @property
    def location(self) -> DeviceLocationTracker:
        return self._tracker

    @property
    def sweeper(self) -> ExpirySweeper:
        return self._sweeper

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> OutageMapApp:
        await self.mount()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.unmount()

    async def mount(self, location_provider: LocationProvider | None = None) -> None:
        """Start sweeping and resolve the device location once."""
        self._sweeper.start()
        self._mounted = True
        try:
            self.render()

            provider = location_provider if location_provider is not None else self._location_provider
            if provider is None:
                _logger.debug("Mounted without a location provider")
                return
            result = await self._tracker.request(provider)
            if not self._mounted:
                return
            self._center_on(result)
        except BaseException:
            # __aexit__ never runs for a failed __aenter__.
            await self.unmount()
            raise

    async def unmount(self) -> None:
        self._mounted = False
        await self._sweeper.stop()

    def _center_on(self, result: LocationResult) -> None:
        if isinstance(result, LocationFix) and self._validator.contains(result.coordinates):
            lat, lng = result.coordinates.as_tuple()
            self._map.recenter(lat, lng, self._config.located_zoom)
            return
        lat, lng = self._config.default_center.as_tuple()
        self._map.recenter(lat, lng, self._config.default_zoom)

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def report_outage(self) -> OutageReport | None:
        """Handle "Report an Outage": anchor a report at the device location."""
        return self._create(ReportKind.OUTAGE)

    def mark_working(self) -> OutageReport | None:
        """Handle "Working On It": anchor a report at the map's viewport center."""
        return self._create(ReportKind.WORKING)

    def _create(self, kind: ReportKind) -> OutageReport | None:
        try:
            report = self._resolver.create_report(kind, self._tracker.current)
        except LocationUnavailableError:
            self._show_notice(NOTICE_LOCATION_UNAVAILABLE)
            return None
        except OutsideServiceAreaError:
            self._show_notice(NOTICE_OUTSIDE_SERVICE_AREA)
            return None
        self.render()
        return report

    def _show_notice(self, message: str) -> None:
        if self._notify is None:
            _logger.info("Notice (no notifier attached): %s", message)
            return
        self._notify(message)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> list[MarkerSpec]:
        """Push markers for every active report to the map."""
        markers = build_markers(
            self._store.list(),
            now=self._clock(),
            utc_offset=self._config.display_utc_offset,
        )
        self._map.show_markers(markers)
        return markers

    def _on_sweep(self, evicted: list[OutageReport]) -> None:
        _logger.debug("Re-rendering after %d report(s) expired", len(evicted))
        self.render()
