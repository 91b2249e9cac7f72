"""
Write command builder for the tank level monitor.

This sub-package turns a (DP, integer) pair into a ``WriteCommand`` whose
payload is the value as an unsigned 32-bit big-endian integer.
"""
from tanklink.parsing.commands.builder import (
    WriteCommand,
    coerce_uint32,
    encode_write,
    STATUS_REQUEST,
)

__all__ = [
    "WriteCommand",
    "coerce_uint32",
    "encode_write",
    "STATUS_REQUEST",
]
