"""
Typed decoding of inbound data-point payloads.
"""
from tanklink.parsing.reports.decode import (
    NumericReport,
    Report,
    StateReport,
    Unrecognized,
    decode,
)

__all__ = [
    "NumericReport",
    "Report",
    "StateReport",
    "Unrecognized",
    "decode",
]
