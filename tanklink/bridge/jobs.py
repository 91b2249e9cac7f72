import asyncio
import logging
from typing import Awaitable, Callable, Optional


class ReportConsumer:
    """
    Background task that drains one device's report queue.

    Frames are handed to ``handle`` one at a time; the task wakes every
    ``interval`` seconds to check whether it has been asked to stop.
    """

    def __init__(
        self,
        queue: asyncio.Queue,
        handle: Callable[[object], Awaitable[object]],
        interval: float,
        logger: logging.Logger,
    ):
        self.queue = queue
        self.handle = handle
        self.interval = interval
        self.logger = logger
        self._task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, name: str) -> None:
        if self.running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(self._stop_event), name=name)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._stop_event.set()
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _run(self, stop_event: asyncio.Event) -> None:
        while not stop_event.is_set():
            try:
                frame = await asyncio.wait_for(self.queue.get(), timeout=self.interval)
            except asyncio.TimeoutError:
                continue
            try:
                await self.handle(frame)
            except Exception as exc:  # pragma: no cover - dispatcher already contains its failures
                self.logger.warning("report_consumer_failed", extra={"details": {"error": str(exc)}})
            finally:
                self.queue.task_done()
