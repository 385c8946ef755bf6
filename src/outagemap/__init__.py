"""outagemap - crowd-sourced outage and repair markers for an island service area."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("outagemap")
except PackageNotFoundError:
    __version__ = "0+local"
from outagemap.app import OutageMapApp
from outagemap.config import OutageMapConfig
from outagemap.exceptions import (
    LocationUnavailableError,
    OutageMapConfigError,
    OutageMapError,
    OutsideServiceAreaError,
    PlacementError,
)
from outagemap.geofence import GeofenceValidator
from outagemap.location import DeviceLocationTracker
from outagemap.models import (
    Coordinates,
    GeofenceBounds,
    LocationFailure,
    LocationFix,
    LocationResult,
    MarkerPopup,
    MarkerSpec,
    MarkerVariant,
    OutageReport,
    ReportKind,
)
from outagemap.placement import PlacementResolver
from outagemap.rendering import build_marker, build_markers, format_duration
from outagemap.state.store import ReportStore, ReportsView
from outagemap.surfaces import LocationProvider, MapSurface, ViewportSource
from outagemap.sweeper import ExpirySweeper

__all__ = [
    "__version__",
    "Coordinates",
    "DeviceLocationTracker",
    "ExpirySweeper",
    "GeofenceBounds",
    "GeofenceValidator",
    "LocationFailure",
    "LocationFix",
    "LocationProvider",
    "LocationResult",
    "LocationUnavailableError",
    "MapSurface",
    "MarkerPopup",
    "MarkerSpec",
    "MarkerVariant",
    "OutageMapApp",
    "OutageMapConfig",
    "OutageMapConfigError",
    "OutageMapError",
    "OutageReport",
    "OutsideServiceAreaError",
    "PlacementError",
    "PlacementResolver",
    "ReportKind",
    "ReportStore",
    "ReportsView",
    "ViewportSource",
    "build_marker",
    "build_markers",
    "format_duration",
]
