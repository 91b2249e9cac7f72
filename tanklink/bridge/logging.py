import itertools
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

DEVICE_LOGGER = "tanklink.device"

_device_ids = itertools.count(1)


class EventBuffer(logging.Handler):
    """Bounded in-memory record of one device's log events."""

    def __init__(self, device_id: str, max_entries: int = 200):
        super().__init__(logging.DEBUG)
        self.device_id = device_id
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        entry = {
            "event": record.getMessage(),
            "device": self.device_id,
            "logger": record.name,
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(entry)

    def events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def next_device_id() -> str:
    return f"dev{next(_device_ids)}"


def device_logger(device_id: str, parent: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Build a logger private to one bridge.

    The logger is not registered with ``logging.getLogger``, so it and its
    handlers are released together with the bridge and a later bridge can
    never pick it up. Records still propagate to ``parent`` (by default the
    ``tanklink.device`` logger) and from there to the host's handlers.
    """
    logger = logging.Logger(f"{DEVICE_LOGGER}.{device_id}", logging.DEBUG)
    logger.parent = parent if parent is not None else logging.getLogger(DEVICE_LOGGER)
    return logger
