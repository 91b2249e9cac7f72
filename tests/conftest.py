"""Shared fakes for the channel and capability store."""
from __future__ import annotations

import asyncio
from typing import Any

import pytest


class FakeChannel:
    def __init__(self, fail_dps: set[int] | None = None, delay: float = 0.0) -> None:
        self.sent = []
        self.fail_dps = fail_dps or set()
        self.delay = delay

    async def send(self, command) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if int(command.dp) in self.fail_dps:
            raise ConnectionError(f"no ack for dp {int(command.dp)}")
        self.sent.append(command)


class FakeStore:
    def __init__(self, fail: set[str] | None = None) -> None:
        self.writes: list[tuple[str, Any]] = []
        self.fail = fail or set()

    async def set(self, capability: str, value: Any) -> None:
        if capability in self.fail:
            raise RuntimeError(f"{capability} rejected")
        self.writes.append((capability, value))

    @property
    def values(self) -> dict[str, Any]:
        return dict(self.writes)


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()
