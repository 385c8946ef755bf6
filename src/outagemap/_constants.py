"""Internal constants shared across the library."""

from datetime import timedelta

# ------------------------------------------------------------------
# Report lifecycle
# ------------------------------------------------------------------

#: Seconds a report stays on the map after creation.
REPORT_TTL_SECONDS: int = 3600
REPORT_TTL: timedelta = timedelta(seconds=REPORT_TTL_SECONDS)

#: Seconds between two expiry sweeps.
SWEEP_INTERVAL_SECONDS: float = 60.0

# ------------------------------------------------------------------
# St. Kitts & Nevis service area (approximate)
# ------------------------------------------------------------------

SKN_NORTH = 17.42  # northern tip of St. Kitts
SKN_SOUTH = 17.06  # southern tip of Nevis
SKN_EAST = -62.52
SKN_WEST = -62.87

#: Center of St. Kitts, used when the device is elsewhere or unknown.
SKN_CENTER: tuple[float, float] = (17.3026, -62.7177)

LOCATED_ZOOM = 15
DEFAULT_ZOOM = 12

# St. Kitts observes AST all year.
DISPLAY_UTC_OFFSET: timedelta = timedelta(hours=-4)

# ------------------------------------------------------------------
# Marker presentation
# ------------------------------------------------------------------

#: Working markers draw above outage markers.
WORKING_Z_INDEX_OFFSET = 1000
OUTAGE_Z_INDEX_OFFSET = 0

# ------------------------------------------------------------------
# User-facing notices
# ------------------------------------------------------------------

NOTICE_LOCATION_UNAVAILABLE = "Location not available. Please enable location services."
NOTICE_OUTSIDE_SERVICE_AREA = "Sorry GPS thinks you are outside the area"
