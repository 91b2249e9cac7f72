"""
Static data-point table for the V1 tank level monitor.

Maps the user-facing configuration keys to their data-point (DP) identifiers
and every known DP to the way its payload is decoded. The table is fixed for
the device class; nothing here is discovered or allocated at runtime.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


class DataPointId(IntEnum):
    """DP identifiers reported and accepted by the tank level monitor."""

    LIQUID_LEVEL_STATE = 1
    LIQUID_LEVEL = 2
    MAX_LEVEL = 7
    MIN_LEVEL = 8
    DISTANCE_TO_TOP = 19
    DISTANCE_TO_BOTTOM = 21
    LIQUID_LEVEL_FILL = 22


class DataPointKind(Enum):
    """How a DP payload is interpreted."""

    ENUM = "enum"    # single state byte
    VALUE = "value"  # unsigned 32-bit big-endian


class DataType(IntEnum):
    """Data type byte carried in each DP record on the wire."""

    RAW = 0x00
    BOOL = 0x01
    VALUE = 0x02
    STRING = 0x03
    ENUM = 0x04
    BITMAP = 0x05


CONFIG_KEYS: tuple[str, ...] = ("distance_to_top", "distance_to_bottom", "min_level", "max_level")

CONFIG_KEY_DP: Mapping[str, DataPointId] = MappingProxyType({
    "distance_to_top": DataPointId.DISTANCE_TO_TOP,
    "distance_to_bottom": DataPointId.DISTANCE_TO_BOTTOM,
    "min_level": DataPointId.MIN_LEVEL,
    "max_level": DataPointId.MAX_LEVEL,
})

DP_KINDS: Mapping[DataPointId, DataPointKind] = MappingProxyType({
    DataPointId.LIQUID_LEVEL_STATE: DataPointKind.ENUM,
    DataPointId.LIQUID_LEVEL: DataPointKind.VALUE,
    DataPointId.LIQUID_LEVEL_FILL: DataPointKind.VALUE,
    DataPointId.DISTANCE_TO_TOP: DataPointKind.VALUE,
    DataPointId.DISTANCE_TO_BOTTOM: DataPointKind.VALUE,
    DataPointId.MIN_LEVEL: DataPointKind.VALUE,
    DataPointId.MAX_LEVEL: DataPointKind.VALUE,
})


def lookup_dp(config_key: str) -> Optional[DataPointId]:
    """Return the DP for a configuration key, or ``None`` for unmapped keys."""
    return CONFIG_KEY_DP.get(config_key)


def as_data_point(dp: int) -> Optional[DataPointId]:
    """Return the ``DataPointId`` member for a raw identifier, if it is known."""
    try:
        return DataPointId(dp)
    except ValueError:
        return None


def kind_of(dp: int) -> Optional[DataPointKind]:
    """Return the decoder kind for a DP, or ``None`` when the DP is not in the table."""
    known = as_data_point(dp)
    if known is None:
        return None
    return DP_KINDS[known]


__all__ = [
    "CONFIG_KEYS",
    "CONFIG_KEY_DP",
    "DP_KINDS",
    "DataPointId",
    "DataPointKind",
    "DataType",
    "as_data_point",
    "kind_of",
    "lookup_dp",
]
