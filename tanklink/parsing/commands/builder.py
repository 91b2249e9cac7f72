"""
Write command builder for value data points.

A command serializes to the wire frame
``[0x00] [transid] [dp] [0x02] [0x00 0x04] [value:4 BE]``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tanklink.core.binary import UINT32_MAX, read_uint32_be, uint32_be
from tanklink.datapoints import DataType
from tanklink.parsing.frame import encode_record

# Status byte of an outbound request.
STATUS_REQUEST = 0x00


@dataclass(frozen=True)
class WriteCommand:
    dp: int
    payload: bytes
    datatype: int = DataType.VALUE
    transid: int = 0

    @property
    def value(self) -> int:
        return read_uint32_be(self.payload)

    def to_bytes(self) -> bytes:
        header = bytes([STATUS_REQUEST, self.transid & 0xFF])
        return header + encode_record(self.dp, self.datatype, self.payload)

    def as_dict(self) -> dict:
        return {
            "dp": int(self.dp),
            "value": self.value,
            "transid": self.transid,
            "payload": self.payload.hex(),
        }


def coerce_uint32(value: Any) -> int:
    """
    Validate a value destined for a 32-bit value DP.

    Integers and integral floats are accepted; booleans, fractional numbers,
    other types and anything outside ``[0, 2**32 - 1]`` raise ``ValueError``.
    """
    if isinstance(value, bool):
        raise ValueError(f"boolean is not a valid DP value: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"DP value must be integral, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"DP value must be an integer, got {type(value).__name__}")
    if value < 0 or value > UINT32_MAX:
        raise ValueError(f"DP value {value} is outside the unsigned 32-bit range")
    return value


def encode_write(dp: int, value: Any, transid: int = 0) -> WriteCommand:
    """
    Build a write command for a value DP.

    Args:
        dp: The data-point identifier.
        value: The value to write; see ``coerce_uint32`` for accepted input.
        transid: The transaction id placed in the wire header.

    Returns:
        The ``WriteCommand`` carrying the 4 byte big-endian payload.

    Raises:
        ValueError: If the value cannot be represented as an unsigned 32-bit integer.
    """
    return WriteCommand(
        dp=dp,
        payload=uint32_be(coerce_uint32(value)),
        datatype=DataType.VALUE,
        transid=transid & 0xFF,
    )
