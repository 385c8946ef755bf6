"""Data models for outage reports and their map representation."""

from outagemap.models._base import OutageMapBaseModel, UtcDatetime, ensure_utc, utcnow
from outagemap.models.geo import Coordinates, GeofenceBounds
from outagemap.models.location import LocationFailure, LocationFix, LocationResult
from outagemap.models.marker import MarkerPopup, MarkerSpec, MarkerVariant
from outagemap.models.report import OutageReport, ReportKind

__all__ = [
    "Coordinates",
    "GeofenceBounds",
    "LocationFailure",
    "LocationFix",
    "LocationResult",
    "MarkerPopup",
    "MarkerSpec",
    "MarkerVariant",
    "OutageMapBaseModel",
    "OutageReport",
    "ReportKind",
    "UtcDatetime",
    "ensure_utc",
    "utcnow",
]
