"""
This package contains all modules related to encoding and decoding the
tank level monitor's data-point protocol.

- ``frame``: Wire report parsing into per-DP raw frames.
- ``states``: Tank state byte lookup.
- ``commands``: Write command construction.
- ``reports``: Typed decoding of inbound DP payloads.
"""
