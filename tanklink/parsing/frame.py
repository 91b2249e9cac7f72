"""
Wire layout of data-point reports.

A report starts with a two byte header ``[status] [transid]`` followed by one
or more DP records ``[dp] [datatype] [length:2 BE] [data]``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tanklink.core.binary import read_uint16_be
from tanklink.errors import FrameError

HEADER_SIZE = 2
RECORD_HEADER_SIZE = 4


@dataclass(frozen=True)
class RawFrame:
    """One DP and its undecoded payload."""

    dp: int
    payload: bytes
    datatype: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "dp": self.dp,
            "datatype": self.datatype,
            "payload": self.payload.hex(),
        }


def encode_record(dp: int, datatype: int, data: bytes) -> bytes:
    if len(data) > 0xFFFF:
        raise ValueError("DP record data must fit a 16-bit length")
    return bytes([dp & 0xFF, datatype & 0xFF, (len(data) >> 8) & 0xFF, len(data) & 0xFF]) + data


def parse_report(raw: bytes) -> list[RawFrame]:
    """
    Split a wire report into its DP records.

    Args:
        raw: The report bytes, header included.

    Returns:
        One ``RawFrame`` per DP record, in wire order.

    Raises:
        FrameError: If the header or a record header is truncated, or a
            record's declared length runs past the end of the buffer.
    """
    if len(raw) < HEADER_SIZE:
        raise FrameError("Report is too short to contain a header")

    frames: list[RawFrame] = []
    i = HEADER_SIZE
    while i < len(raw):
        if len(raw) - i < RECORD_HEADER_SIZE:
            raise FrameError(f"Truncated DP record header at offset {i}")
        dp = raw[i]
        datatype = raw[i + 1]
        length = read_uint16_be(raw, i + 2)
        start = i + RECORD_HEADER_SIZE
        end = start + length
        if end > len(raw):
            raise FrameError(f"DP {dp} declares {length} byte(s) but only {len(raw) - start} remain")
        frames.append(RawFrame(dp=dp, payload=bytes(raw[start:end]), datatype=datatype))
        i = end
    return frames


__all__ = ["RawFrame", "encode_record", "parse_report"]
