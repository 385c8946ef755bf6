"""In-memory report store.

This is the only component allowed to mutate the set of live reports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from outagemap.models._base import ensure_utc, utcnow
from outagemap.models.report import OutageReport
from outagemap.state.policy import partition_expired

_logger = logging.getLogger(__name__)


class ReportsView:
    """Lazy, restartable view over the store's active reports.

    Each iteration reads the store at the moment iteration begins, so a view
    obtained once keeps reflecting later adds and sweeps.
    """

    def __init__(self, store: ReportStore) -> None:
        self._store = store

    def __iter__(self) -> Iterator[OutageReport]:
        # Sweeps rebind the backing list, so a running iteration never sees a half-swept store.
        return iter(self._store._reports)  # noqa: SLF001

    def __len__(self) -> int:
        return len(self._store)

    def __bool__(self) -> bool:
        return len(self._store) > 0


class ReportStore:
    """Insertion-ordered collection of active reports with time-based eviction.

    Order is render order, not significance order. No locking: all calls are
    expected to come from the same event loop.
    """

    def __init__(self, *, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._reports: list[OutageReport] = []

    def __len__(self) -> int:
        return len(self._reports)

    def __contains__(self, report_id: object) -> bool:
        return any(report.id == report_id for report in self._reports)

    def add(self, report: OutageReport) -> None:
        """Append *report*. Validation is the caller's job."""
        self._reports.append(report)
        _logger.debug("Report added id=%s kind=%s total=%d", report.id, report.kind, len(self._reports))

    def sweep(self, now: datetime | None = None) -> list[OutageReport]:
        """Drop every report with ``expires_at <= now`` and return the evicted ones.

        Sweeping twice with the same *now* leaves the store unchanged the
        second time.
        """
        at = ensure_utc(now if now is not None else self._clock())
        active, expired = partition_expired(self._reports, at)
        if expired:
            self._reports = active
            _logger.debug("Sweep at %s evicted=%d remaining=%d", at.isoformat(), len(expired), len(active))
        return expired

    def list(self) -> ReportsView:
        return ReportsView(self)

    def get(self, report_id: str) -> OutageReport | None:
        for report in self._reports:
            if report.id == report_id:
                return report
        return None
