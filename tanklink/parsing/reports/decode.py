from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tanklink.core.binary import UINT32_SIZE, read_uint32_be, safe_byte_at
from tanklink.datapoints import DataPointId, DataPointKind, as_data_point, DP_KINDS
from tanklink.errors import TruncatedPayloadError, UnknownStateError
from tanklink.parsing.frame import RawFrame
from tanklink.parsing.states import TankState, state_of


@dataclass(frozen=True)
class StateReport:
    dp: DataPointId
    state: TankState


@dataclass(frozen=True)
class NumericReport:
    dp: DataPointId
    value: int


@dataclass(frozen=True)
class Unrecognized:
    dp: int


Report = Union[StateReport, NumericReport, Unrecognized]


def decode(frame: RawFrame) -> Report:
    """
    Interpret a frame's payload according to its DP.

    The state DP reads one byte through the state map; every other known DP
    reads an unsigned 32-bit big-endian integer from the first four bytes.
    DPs outside the table come back as ``Unrecognized``.

    Raises:
        UnknownStateError: The state byte has no named state.
        TruncatedPayloadError: The payload is shorter than the DP requires.
    """
    dp = as_data_point(frame.dp)
    if dp is None:
        return Unrecognized(dp=frame.dp)

    if DP_KINDS[dp] is DataPointKind.ENUM:
        raw = safe_byte_at(frame.payload, 0)
        if raw is None:
            raise TruncatedPayloadError(dp, 1, 0)
        state = state_of(raw)
        if state is None:
            raise UnknownStateError(dp, raw)
        return StateReport(dp=dp, state=state)

    if len(frame.payload) < UINT32_SIZE:
        raise TruncatedPayloadError(dp, UINT32_SIZE, len(frame.payload))
    return NumericReport(dp=dp, value=read_uint32_be(frame.payload))
