"""Periodic sweeps for in-process state (search cache, rate-limit windows).

Each sweeper runs as its own asyncio task on a fixed interval, independent
of request traffic, until asked to stop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicSweeper:
    """Call a synchronous sweep function every `interval` seconds."""

    def __init__(self, name: str, sweep: Callable[[], int], interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.name = name
        self.sweep = sweep
        self.interval = interval
        self._stop_event = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    def run_once(self) -> int:
        removed = self.sweep()
        logger.debug("Sweep %s removed %d entries", self.name, removed)
        return removed

    async def run_forever(self) -> None:
        """Sweep after each interval until stopped."""
        while not self._stop_event.is_set():
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                try:
                    self.run_once()
                except Exception:  # noqa: BLE001
                    logger.exception("Sweep %s failed", self.name)

    def start(self) -> asyncio.Task:
        self._task = asyncio.create_task(self.run_forever(), name=f"sweep-{self.name}")
        return self._task

    def request_stop(self) -> None:
        self._stop_event.set()

    async def stop(self) -> None:
        self.request_stop()
        if self._task is not None:
            await self._task
            self._task = None
