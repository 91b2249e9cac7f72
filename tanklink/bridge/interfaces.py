from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from tanklink.parsing.commands import WriteCommand


@runtime_checkable
class Channel(Protocol):
    """Transport that carries write commands to the device. Raises on failure."""

    async def send(self, command: WriteCommand) -> None: ...


@runtime_checkable
class CapabilityStore(Protocol):
    """Per-capability, last-write-wins value store. Raises on failure."""

    async def set(self, capability: str, value: Any) -> None: ...
