from __future__ import annotations

from typing import Iterable


UINT32_MAX = 0xFFFFFFFF
UINT32_SIZE = 4


def uint32_be(value: int) -> bytes:
    if value < 0 or value > UINT32_MAX:
        raise ValueError(f"value must be between 0 and {UINT32_MAX}, got {value}")
    return value.to_bytes(UINT32_SIZE, byteorder="big")


def read_uint32_be(data: bytes, offset: int = 0) -> int:
    chunk = data[offset: offset + UINT32_SIZE]
    if len(chunk) < UINT32_SIZE:
        raise ValueError(f"need {UINT32_SIZE} bytes at offset {offset}, got {len(chunk)}")
    return int.from_bytes(chunk, byteorder="big")


def read_uint16_be(data: bytes, offset: int = 0) -> int:
    chunk = data[offset: offset + 2]
    if len(chunk) < 2:
        raise ValueError(f"need 2 bytes at offset {offset}, got {len(chunk)}")
    return (chunk[0] << 8) | chunk[1]


def safe_byte_at(data: Iterable[int] | bytes, index: int) -> int | None:
    try:
        return list(data)[index]
    except (IndexError, TypeError):
        return None
