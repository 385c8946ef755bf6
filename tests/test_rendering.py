from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from outagemap.models import Coordinates, MarkerVariant, OutageReport, ReportKind
from outagemap.rendering import build_marker, build_markers, format_clock, format_duration


def _dt() -> datetime:
    return datetime(2026, 1, 1, 16, 30, 5, tzinfo=UTC)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (3600, "1 hour"),
        (60, "1 minute"),
        (1, "1 second"),
        (0, "0 seconds"),
        (7200, "2 hours"),
        (3900, "1 hour 5 minutes"),
        (3661, "1 hour 1 minute 1 second"),
        (59.9, "59 seconds"),
        (-5, "0 seconds"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_format_clock_uses_offset() -> None:
    assert format_clock(_dt()) == "12:30:05"
    assert format_clock(_dt(), timedelta(0)) == "16:30:05"


def test_outage_marker() -> None:
    report = OutageReport.create(ReportKind.OUTAGE, Coordinates.of(17.30, -62.71), now=_dt())
    marker = build_marker(report, now=_dt() + timedelta(minutes=15))

    assert marker.report_id == report.id
    assert marker.position == report.coordinates
    assert marker.variant is MarkerVariant.RED
    assert marker.z_index_offset == 0
    assert marker.popup.title == "Service Outage"
    assert marker.popup.lines == (
        "Reported: 12:30:05",
        "Expires: 13:30:05",
        "Expires in 45 minutes",
    )


def test_working_marker_draws_above_outage() -> None:
    outage = OutageReport.create(ReportKind.OUTAGE, Coordinates.of(17.30, -62.71), now=_dt())
    working = OutageReport.create(ReportKind.WORKING, Coordinates.of(17.35, -62.60), now=_dt())

    markers = build_markers([working, outage], now=_dt())

    assert [m.report_id for m in markers] == [working.id, outage.id]
    assert markers[0].variant is MarkerVariant.BLUE
    assert markers[0].popup.title == "Working On It"
    assert markers[0].z_index_offset > markers[1].z_index_offset


def test_marker_without_now_has_no_countdown() -> None:
    report = OutageReport.create(ReportKind.OUTAGE, Coordinates.of(17.30, -62.71), now=_dt())
    marker = build_marker(report)
    assert len(marker.popup.lines) == 2
    assert marker.popup.as_text().startswith("Service Outage\nReported: ")
