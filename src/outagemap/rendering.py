"""Turn reports into marker specs for the mapping collaborator."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from outagemap._constants import DISPLAY_UTC_OFFSET, OUTAGE_Z_INDEX_OFFSET, WORKING_Z_INDEX_OFFSET
from outagemap.models._base import ensure_utc, utcnow
from outagemap.models.marker import MarkerPopup, MarkerSpec, MarkerVariant
from outagemap.models.report import OutageReport, ReportKind

_VARIANTS: dict[ReportKind, MarkerVariant] = {
    ReportKind.OUTAGE: MarkerVariant.RED,
    ReportKind.WORKING: MarkerVariant.BLUE,
}

_Z_INDEX: dict[ReportKind, int] = {
    ReportKind.OUTAGE: OUTAGE_Z_INDEX_OFFSET,
    ReportKind.WORKING: WORKING_Z_INDEX_OFFSET,
}

_TITLES: dict[ReportKind, str] = {
    ReportKind.OUTAGE: "Service Outage",
    ReportKind.WORKING: "Working On It",
}

_UNITS: tuple[tuple[str, int], ...] = (("hour", 3600), ("minute", 60), ("second", 1))


def format_duration(seconds: float) -> str:
    """Render a duration as ``"1 hour 5 minutes"``.

    Zero-valued units are skipped; a zero (or negative) duration is
    ``"0 seconds"``. Fractions of a second are truncated.
    """
    remaining = max(0, int(seconds))
    if remaining == 0:
        return "0 seconds"
    parts: list[str] = []
    for name, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count} {name}" if count == 1 else f"{count} {name}s")
    return " ".join(parts)


def format_clock(value: datetime, utc_offset: timedelta = DISPLAY_UTC_OFFSET) -> str:
    """Wall-clock ``HH:MM:SS`` of *value* at the given UTC offset."""
    return ensure_utc(value).astimezone(timezone(utc_offset)).strftime("%H:%M:%S")


def build_marker(
    report: OutageReport,
    *,
    now: datetime | None = None,
    utc_offset: timedelta = DISPLAY_UTC_OFFSET,
) -> MarkerSpec:
    lines = [
        f"Reported: {format_clock(report.created_at, utc_offset)}",
        f"Expires: {format_clock(report.expires_at, utc_offset)}",
    ]
    if now is not None:
        left = (report.expires_at - ensure_utc(now)).total_seconds()
        lines.append(f"Expires in {format_duration(left)}")

    return MarkerSpec(
        report_id=report.id,
        kind=report.kind,
        position=report.coordinates,
        variant=_VARIANTS[report.kind],
        z_index_offset=_Z_INDEX[report.kind],
        popup=MarkerPopup(title=_TITLES[report.kind], lines=tuple(lines)),
    )


def build_markers(
    reports: Iterable[OutageReport],
    *,
    now: datetime | None = None,
    utc_offset: timedelta = DISPLAY_UTC_OFFSET,
) -> list[MarkerSpec]:
    """Markers for *reports*, in the order given."""
    at = ensure_utc(now) if now is not None else utcnow()
    return [build_marker(report, now=at, utc_offset=utc_offset) for report in reports]
