"""Periodic expiry sweeper."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from outagemap._constants import SWEEP_INTERVAL_SECONDS
from outagemap.models._base import ensure_utc, utcnow
from outagemap.models.report import OutageReport
from outagemap.state.store import ReportStore

_logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Asyncio task that evicts expired reports on a fixed period.

    Usage::

        async with ExpirySweeper(store) as sweeper:
            ...

    The sweeper is bound to the lifetime of its owner: once :meth:`stop` has
    run, the store is never touched again.
    """

    def __init__(
        self,
        store: ReportStore,
        *,
        interval: float = SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = utcnow,
        on_sweep: Callable[[list[OutageReport]], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._store = store
        self._interval = interval
        self._clock = clock
        self._on_sweep = on_sweep
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval(self) -> float:
        return self._interval

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ExpirySweeper:
        self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.stop()

    def start(self) -> None:
        """Schedule the sweep loop on the running event loop."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="outagemap-expiry-sweeper")
        _logger.debug("Expiry sweeper started interval=%.1fs", self._interval)

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        _logger.debug("Expiry sweeper stopped")

    # ------------------------------------------------------------------
    # Sweeping
    # ------------------------------------------------------------------

    def tick(self) -> list[OutageReport]:
        """Run one sweep now and return the evicted reports."""
        evicted = self._store.sweep(ensure_utc(self._clock()))
        if evicted and self._on_sweep is not None:
            self._on_sweep(evicted)
        return evicted

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.tick()
            except Exception:
                # The store itself cannot fail; this is the on_sweep callback.
                _logger.exception("Expiry sweep callback failed")
