"""Expiry policy.

This module intentionally holds no state; the store decides *when* to apply
the policy, this module decides *what* is expired.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from outagemap.models.report import OutageReport


def is_expired(now: datetime, expires_at: datetime) -> bool:
    return now >= expires_at


def partition_expired(
    reports: Iterable[OutageReport],
    now: datetime,
) -> tuple[list[OutageReport], list[OutageReport]]:
    """Split *reports* into ``(active, expired)`` preserving order."""
    active: list[OutageReport] = []
    expired: list[OutageReport] = []
    for report in reports:
        (expired if is_expired(now, report.expires_at) else active).append(report)
    return active, expired
