"""
Push configuration values to the device as DP write commands.

Keys are walked in the order given. Keys without a DP and keys whose value is
empty are skipped; every remaining key produces exactly one write command.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, Optional

from tanklink.datapoints import DataPointId, lookup_dp
from tanklink.errors import ChannelWriteError
from tanklink.parsing.commands import WriteCommand, encode_write

logger = logging.getLogger(__name__)

_MISSING = object()


class SkipReason(str, Enum):
    UNMAPPED_CONFIG_KEY = "unmapped_config_key"
    EMPTY_VALUE = "empty_value"


@dataclass(frozen=True)
class WriteOutcome:
    key: str
    command: Optional[WriteCommand] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_empty_value(value: Any) -> bool:
    """
    Return True for values that are not written to the device.

    Absent (``None``), zero (``0``, ``0.0``, ``False``) and the empty string
    count as empty. A threshold of zero is therefore never pushed.
    """
    if value is None or value is _MISSING:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _pending_writes(
    changed_keys: Iterable[str], values: Mapping[str, Any], log: logging.Logger
) -> Iterator[tuple[str, DataPointId, Any]]:
    """Yield ``(key, dp, value)`` for every key that should be written, in order."""
    for key in changed_keys:
        dp = lookup_dp(key)
        if dp is None:
            log.debug("write_skipped", extra={"details": {"key": key, "reason": SkipReason.UNMAPPED_CONFIG_KEY.value}})
            continue
        value = values.get(key, _MISSING)
        if is_empty_value(value):
            log.debug("write_skipped", extra={"details": {"key": key, "reason": SkipReason.EMPTY_VALUE.value}})
            continue
        yield key, dp, value


def plan_writes(changed_keys: Iterable[str], values: Mapping[str, Any]) -> list[WriteCommand]:
    """Build the write commands for ``changed_keys`` without sending anything."""
    commands: list[WriteCommand] = []
    for key, dp, value in _pending_writes(changed_keys, values, logger):
        try:
            commands.append(encode_write(dp, value))
        except ValueError as exc:
            logger.warning("write_failed", extra={"details": {"key": key, "error": str(exc)}})
    return commands


class SettingsSynchronizer:
    """
    Sends write commands through a channel, one per changed key.

    A failure on one key is recorded in its ``WriteOutcome`` and logged; the
    remaining keys are still processed. Concurrent ``sync`` calls are
    serialized so commands for the same DP leave in issuance order.
    """

    def __init__(self, channel, write_timeout: float = 10.0, logger: Optional[logging.Logger] = None) -> None:
        self.channel = channel
        self.write_timeout = write_timeout
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._lock = asyncio.Lock()
        self._transid = 0

    def _next_transid(self) -> int:
        transid = self._transid
        self._transid = (self._transid + 1) & 0xFF
        return transid

    async def _send(self, command: WriteCommand) -> None:
        try:
            await asyncio.wait_for(self.channel.send(command), timeout=self.write_timeout)
        except asyncio.TimeoutError as exc:
            raise ChannelWriteError(
                f"Write to DP {command.dp} timed out after {self.write_timeout}s", command=command, cause=exc
            ) from exc
        except Exception as exc:
            raise ChannelWriteError(f"Write to DP {command.dp} failed: {exc}", command=command, cause=exc) from exc

    async def sync(self, changed_keys: Iterable[str], values: Mapping[str, Any]) -> list[WriteOutcome]:
        outcomes: list[WriteOutcome] = []
        async with self._lock:
            for key, dp, value in _pending_writes(changed_keys, values, self.logger):
                command: Optional[WriteCommand] = None
                try:
                    command = replace(encode_write(dp, value), transid=self._next_transid())
                    await self._send(command)
                except (ValueError, ChannelWriteError) as exc:
                    self.logger.warning(
                        "write_failed",
                        extra={"details": {"key": key, "dp": int(dp), "value": value, "error": str(exc)}},
                    )
                    outcomes.append(WriteOutcome(key=key, command=command, error=exc))
                    continue
                self.logger.info("write_sent", extra={"details": {"key": key, "dp": int(dp), "value": command.value}})
                outcomes.append(WriteOutcome(key=key, command=command))
        return outcomes


__all__ = ["SettingsSynchronizer", "SkipReason", "WriteOutcome", "is_empty_value", "plan_writes"]
