from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Mapping, Optional

from tanklink.bridge.config import BridgeSettings, get_settings
from tanklink.bridge.jobs import ReportConsumer
from tanklink.bridge.logging import EventBuffer, device_logger, next_device_id
from tanklink.dispatch import UpdateDispatcher
from tanklink.errors import FrameError
from tanklink.parsing.frame import RawFrame, parse_report
from tanklink.sync import SettingsSynchronizer, WriteOutcome


class TankMonitorBridge:
    """
    Session glue for one tank level monitor.

    Settings snapshots and change events go out through the synchronizer.
    Inbound reports are split into frames, queued, and dispatched one at a
    time, either by the background job started with ``start()`` or by
    ``process_pending()``.
    """

    def __init__(
        self,
        channel,
        store,
        settings: Optional[BridgeSettings] = None,
        logger: Optional[logging.Logger] = None,
        device_id: Optional[str] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.device_id = device_id or next_device_id()
        self.logger = device_logger(self.device_id, parent=logger)
        self.event_buffer = EventBuffer(self.device_id, max_entries=self.settings.log_ring_size)
        self.logger.addHandler(self.event_buffer)
        self.synchronizer = SettingsSynchronizer(channel, write_timeout=self.settings.write_timeout, logger=self.logger)
        self.dispatcher = UpdateDispatcher(store, logger=self.logger)
        self.queue: asyncio.Queue[RawFrame] = asyncio.Queue(maxsize=self.settings.queue_max_size)
        self.lock = asyncio.Lock()
        self.consumer = ReportConsumer(self.queue, self.handle_frame, self.settings.report_poll_interval, self.logger)

    # ---- lifecycle ----
    async def start(self) -> None:
        if self.consumer.running:
            return
        self.consumer.start(name=f"tanklink-reports-{self.device_id}")
        self.logger.info("bridge_started")

    async def stop(self) -> None:
        await self.consumer.stop()
        self.logger.info("bridge_stopped", extra={"details": {"pending": self.queue.qsize()}})

    # ---- outbound ----
    async def initialize(self, values: Mapping[str, Any]) -> list[WriteOutcome]:
        """Push a full settings snapshot; every key counts as changed."""
        return await self.synchronizer.sync(list(values.keys()), values)

    async def on_settings(
        self,
        old_values: Mapping[str, Any],
        new_values: Mapping[str, Any],
        changed_keys: Iterable[str],
    ) -> list[WriteOutcome]:
        keys = list(changed_keys)
        outcomes = await self.synchronizer.sync(keys, new_values)
        self.logger.info(
            "settings_changed",
            extra={"details": {
                "changed": keys,
                "previous": {k: old_values.get(k) for k in keys},
                "failed": [o.key for o in outcomes if not o.ok],
            }},
        )
        return outcomes

    # ---- inbound ----
    def submit_frame(self, frame: RawFrame) -> bool:
        try:
            self.queue.put_nowait(frame)
        except asyncio.QueueFull:
            self.logger.warning("report_dropped", extra={"details": {"dp": frame.dp, "reason": "queue_full"}})
            return False
        return True

    def submit_report(self, raw: bytes) -> int:
        """Split a wire report into frames and queue them. Returns the number queued."""
        try:
            frames = parse_report(raw)
        except FrameError as exc:
            self.logger.warning("report_malformed", extra={"details": {"raw": bytes(raw).hex(), "error": str(exc)}})
            return 0
        return sum(1 for frame in frames if self.submit_frame(frame))

    async def handle_frame(self, frame: RawFrame) -> bool:
        async with self.lock:
            return await self.dispatcher.handle_frame(frame)

    async def process_pending(self) -> int:
        """Dispatch everything currently queued. Returns the number of frames handled."""
        handled = 0
        while True:
            try:
                frame = self.queue.get_nowait()
            except asyncio.QueueEmpty:
                return handled
            try:
                await self.handle_frame(frame)
            finally:
                self.queue.task_done()
            handled += 1

    def events(self) -> list[dict]:
        return self.event_buffer.events()
