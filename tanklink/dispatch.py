"""
Route decoded reports to the capability store.

Every DP maps to exactly one ``Route``. Three routes update a capability; the
distance and threshold routes only log the reading, since the device echoes
them back after a settings write and they have no capability of their own.
"""
from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from tanklink.datapoints import DataPointId, as_data_point
from tanklink.errors import CapabilityWriteError, DecodeError
from tanklink.parsing.frame import RawFrame
from tanklink.parsing.reports import NumericReport, Report, StateReport, Unrecognized, decode

CAPABILITY_TANK_STATE = "tank_state"
CAPABILITY_LIQUID_LEVEL = "liquid_level"
CAPABILITY_LIQUID_LEVEL_FILL = "liquid_level_fill"


class Route(Enum):
    TANK_STATE = "tank_state"
    LIQUID_LEVEL = "liquid_level"
    LIQUID_LEVEL_FILL = "liquid_level_fill"
    DISTANCE_TO_BOTTOM = "distance_to_bottom"
    DISTANCE_TO_TOP = "distance_to_top"
    MIN_LEVEL = "min_level"
    MAX_LEVEL = "max_level"
    UNKNOWN = "unknown"


ROUTES: Mapping[DataPointId, Route] = MappingProxyType({
    DataPointId.LIQUID_LEVEL_STATE: Route.TANK_STATE,
    DataPointId.LIQUID_LEVEL: Route.LIQUID_LEVEL,
    DataPointId.LIQUID_LEVEL_FILL: Route.LIQUID_LEVEL_FILL,
    DataPointId.DISTANCE_TO_BOTTOM: Route.DISTANCE_TO_BOTTOM,
    DataPointId.DISTANCE_TO_TOP: Route.DISTANCE_TO_TOP,
    DataPointId.MIN_LEVEL: Route.MIN_LEVEL,
    DataPointId.MAX_LEVEL: Route.MAX_LEVEL,
})

# Routes that update a capability; the rest are observational.
CAPABILITY_ROUTES: Mapping[Route, str] = MappingProxyType({
    Route.TANK_STATE: CAPABILITY_TANK_STATE,
    Route.LIQUID_LEVEL: CAPABILITY_LIQUID_LEVEL,
    Route.LIQUID_LEVEL_FILL: CAPABILITY_LIQUID_LEVEL_FILL,
})

OBSERVATIONAL_ROUTES = frozenset({
    Route.DISTANCE_TO_BOTTOM,
    Route.DISTANCE_TO_TOP,
    Route.MIN_LEVEL,
    Route.MAX_LEVEL,
})


def route_for(dp: int) -> Route:
    known = as_data_point(dp)
    if known is None:
        return Route.UNKNOWN
    return ROUTES[known]


class UpdateDispatcher:
    """
    Stateless dispatcher from decoded reports to capability writes.

    Nothing raised by decoding or by the store escapes ``dispatch`` or
    ``handle_frame``; failures are logged and the call returns ``False``.
    """

    def __init__(self, store, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    async def _set(self, capability: str, value: Any) -> bool:
        try:
            await self.store.set(capability, value)
        except Exception as exc:
            err = CapabilityWriteError(capability, value, cause=exc)
            self.logger.warning("capability_write_failed", extra={"details": {"capability": capability, "error": str(err)}})
            return False
        self.logger.info("capability_updated", extra={"details": {"capability": capability, "value": value}})
        return True

    async def dispatch(self, report: Report) -> bool:
        """Apply one decoded report. Returns True when a capability was written."""
        if isinstance(report, Unrecognized):
            self.logger.debug("dp_ignored", extra={"details": {"dp": report.dp}})
            return False

        route = route_for(report.dp)
        if route in OBSERVATIONAL_ROUTES:
            self.logger.info("dp_observed", extra={"details": {"route": route.value, "value": _value_of(report)}})
            return False

        capability = CAPABILITY_ROUTES.get(route)
        if capability is None:
            return False
        return await self._set(capability, _value_of(report))

    async def handle_frame(self, frame: RawFrame) -> bool:
        """Decode a raw frame and dispatch it."""
        try:
            report = decode(frame)
        except DecodeError as exc:
            self.logger.warning(
                "report_rejected",
                extra={"details": {"dp": exc.dp, "payload": frame.payload.hex(), "error": str(exc)}},
            )
            return False
        return await self.dispatch(report)


def _value_of(report: Report) -> Any:
    if isinstance(report, StateReport):
        return report.state.value
    if isinstance(report, NumericReport):
        return report.value
    return None


__all__ = [
    "CAPABILITY_LIQUID_LEVEL",
    "CAPABILITY_LIQUID_LEVEL_FILL",
    "CAPABILITY_ROUTES",
    "CAPABILITY_TANK_STATE",
    "OBSERVATIONAL_ROUTES",
    "ROUTES",
    "Route",
    "UpdateDispatcher",
    "route_for",
]
