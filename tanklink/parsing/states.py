from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class TankState(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    FULL = "full"


TANK_STATES: Mapping[int, TankState] = MappingProxyType({
    1: TankState.LOW,
    0: TankState.NORMAL,
    2: TankState.FULL,
})


def state_of(raw: int) -> Optional[TankState]:
    """Map a raw state byte to a ``TankState``; unmapped bytes yield ``None``."""
    return TANK_STATES.get(raw)


__all__ = ["TANK_STATES", "TankState", "state_of"]
